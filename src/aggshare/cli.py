import argparse
import json
import sys

from .errors import SharingError
from .homomorphic_hash import HomomorphicHash
from .lagrange import reconstruct
from .linear_signature import LinearSignature
from .log import configure_logging
from .parameters import StaticPublicParameters

CONSTRUCTIONS = {'hash': HomomorphicHash, 'linear': LinearSignature}


def share(args):
    parameters = StaticPublicParameters.from_file(args.params)
    sharer = CONSTRUCTIONS[args.construction](parameters)
    data = sharer.share_secret(args.secret)
    print(json.dumps(data.to_dict(), indent=2))


def load_shares(path):
    with open(path, 'r', encoding='utf-8') as f:
        weighted_shares = json.load(f)
    if not isinstance(weighted_shares, list):
        raise ValueError('Shares file must hold a JSON list.')
    for share in weighted_shares:
        if not isinstance(share, int) or isinstance(share, bool):
            raise ValueError(f'Weighted shares must be integers, got {share!r}.')
    return weighted_shares


def combine(args):
    weighted_shares = load_shares(args.shares)
    points = range(1, len(weighted_shares) + 1)
    secret = reconstruct(dict(zip(points, weighted_shares)), points, args.subset)
    print(secret)


def main(argv=None):
    parser = argparse.ArgumentParser(prog='aggshare')
    parser.add_argument('--log-level', type=str, default=None, help='Log level.')
    subparsers = parser.add_subparsers()

    parser_share = subparsers.add_parser('share', help='Share a secret among the servers.')
    parser_share.add_argument('--params', type=str, required=True, help='Public parameter JSON file.')
    parser_share.add_argument('--secret', type=int, required=True, help='Secret to share.')
    parser_share.add_argument(
        '--construction', choices=sorted(CONSTRUCTIONS), default='hash', help='Commitment construction.'
    )
    parser_share.set_defaults(func=share)

    parser_combine = subparsers.add_parser('reconstruct', help='Reconstruct a secret from weighted shares.')
    parser_combine.add_argument('--shares', type=str, required=True, help='JSON list of weighted shares.')
    parser_combine.add_argument('--subset', type=int, nargs='+', required=True, help='Server indexes to combine.')
    parser_combine.set_defaults(func=combine)

    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    if not hasattr(args, 'func'):
        parser.print_help()
        return 0
    try:
        args.func(args)
    except (SharingError, ValueError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
