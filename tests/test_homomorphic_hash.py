import itertools
import random
import unittest
from collections import Counter

from aggshare import Construction, HomomorphicHash, ParameterError, Polynomial, reconstruct
from aggshare.log import configure_logging

from fixtures import ListedParameters, make_parameters


def setUpModule():
    configure_logging("warning")


class Tests(unittest.TestCase):
    def setUp(self):
        self.parameters = make_parameters(field_base=23, generator=5, threshold=1)
        self.hash = HomomorphicHash(self.parameters, rng=random.Random(7))

    def test_three_servers_secret_seven(self):
        data = self.hash.share_secret(7)

        self.assertEqual(len(data.shares), 3)
        self.assertEqual(
            list(data.shares),
            [
                "http://localhost:2000/api/hash-client-share",
                "http://localhost:2001/api/hash-client-share",
                "http://localhost:2002/api/hash-client-share",
            ],
        )
        self.assertEqual(sum(data.shares.values()), 7)

        weighted = dict(zip((1, 2, 3), data.shares.values()))
        for subset in itertools.combinations((1, 2, 3), 2):
            self.assertEqual(reconstruct(weighted, (1, 2, 3), subset), 7)

    def test_commitment_binds_secret_and_nonce(self):
        for secret in (0, 1, 7, 22, 1000, -5):
            data = self.hash.share_secret(secret)
            self.assertTrue(0 <= data.nonce < 23)
            self.assertEqual(
                data.proof_component, HomomorphicHash.hash(23, secret + data.nonce, 5)
            )
            self.assertEqual(data.proof_component, pow(5, secret + data.nonce, 23))

    def test_hash(self):
        self.assertEqual(HomomorphicHash.hash(23, 3, 5), 10)
        self.assertEqual(HomomorphicHash.hash(23, 0, 5), 1)

    def test_threshold_reconstruction(self):
        p = 2**127 - 1
        parameters = make_parameters(field_base=p, generator=3, threshold=2, servers=5)
        sharer = HomomorphicHash(parameters, rng=random.Random(11))
        points = (1, 2, 3, 4, 5)

        for secret in (0, 12345, 2**100):
            data = sharer.share_secret(secret)
            weighted = dict(zip(points, data.shares.values()))
            self.assertEqual(sum(weighted.values()), secret)
            for size in (3, 4, 5):
                for subset in itertools.combinations(points, size):
                    self.assertEqual(reconstruct(weighted, points, subset), secret)

    def test_coefficients_are_nonzero_field_elements(self):
        rng = random.Random(3)
        for _ in range(500):
            polynomial = Polynomial.random(9, 3, 5, rng)
            self.assertEqual(polynomial.degree, 3)
            for coefficient in polynomial.coefficients:
                self.assertTrue(1 <= coefficient <= 4)

    def test_single_share_distribution(self):
        # One share (t = 1) should look the same whatever the secret is.
        trials = 5000
        counts = []
        for secret in (0, 11):
            counter = Counter()
            for _ in range(trials):
                shares = self.hash.generate_shares(secret, 23, Construction.HASH)
                counter[next(iter(shares.values())) % 23] += 1
            counts.append(counter)

        distance = sum(
            abs(counts[0][r] - counts[1][r]) for r in range(23)
        ) / (2 * trials)
        self.assertLess(distance, 0.2)

    def test_fresh_randomness_per_call(self):
        p = 2**127 - 1
        sharer = HomomorphicHash(make_parameters(field_base=p, generator=3))
        results = [sharer.share_secret(42) for _ in range(20)]

        self.assertEqual(len({data.nonce for data in results}), 20)
        self.assertEqual(
            len({tuple(data.shares.values()) for data in results}), 20
        )

    def test_secret_must_be_int(self):
        with self.assertRaises(ValueError):
            self.hash.share_secret(7.0)
        with self.assertRaises(ValueError):
            self.hash.share_secret("7")

    def test_payload(self):
        data = self.hash.share_secret(7)
        payload = data.to_dict()
        self.assertEqual(payload["nonce"], data.nonce)
        self.assertEqual(payload["proofComponent"], data.proof_component)
        self.assertEqual(payload["shares"], data.shares)

    def test_provider_threshold_must_be_positive(self):
        for threshold in (0, -1):
            sharer = HomomorphicHash(ListedParameters(threshold=threshold))
            with self.assertRaises(ParameterError):
                sharer.share_secret(7)

    def test_provider_servers_must_exceed_threshold(self):
        with self.assertRaises(ParameterError):
            HomomorphicHash(ListedParameters(servers=0)).share_secret(7)
        with self.assertRaises(ParameterError):
            HomomorphicHash(ListedParameters(threshold=3, servers=3)).share_secret(7)

    def test_provider_modulus_must_be_positive(self):
        for field_base in (0, -23):
            sharer = HomomorphicHash(ListedParameters(field_base=field_base))
            with self.assertRaises(ParameterError):
                sharer.share_secret(7)

    def test_generate_shares_checks_threshold(self):
        sharer = HomomorphicHash(ListedParameters(threshold=0))
        with self.assertRaises(ParameterError):
            sharer.generate_shares(7, 23, Construction.HASH)

    def test_valid_provider(self):
        data = HomomorphicHash(ListedParameters(), rng=random.Random(4)).share_secret(7)
        self.assertEqual(sum(data.shares.values()), 7)


if __name__ == "__main__":
    unittest.main()
