from aggshare import LinearPublicData, PublicParameters, Server, StaticPublicParameters

SUBSTATION_ID = 1
FID = 7
CLIENT_ID = 2

# 1009 and 1013 are prime; eN = 377 * 31 is coprime with 1008 * 1012
TOY_LINEAR = {
    "n": 377,
    "fid_prime": 31,
    "n_roof": 1009 * 1013,
    "g1": 2,
    "g2": 3,
    "h": {"0": 5, "1": 7, "2": 11},
    "sk": [1009, 1013],
}

PARAMETER_DOCUMENT = {
    "substation_id": SUBSTATION_ID,
    "threshold": 1,
    "servers": [
        "http://localhost:2000/",
        "http://localhost:2001/",
        "http://localhost:2002/",
    ],
    "substations": {"1": {"field_base": 23, "generator": 5}},
    "linear": {"1": {"7": TOY_LINEAR}},
}


def make_parameters(field_base=23, generator=5, threshold=1, servers=3, linear=None):
    return StaticPublicParameters(
        substation_id=SUBSTATION_ID,
        threshold=threshold,
        servers=[Server(f"http://localhost:{2000 + i}/") for i in range(servers)],
        fields={SUBSTATION_ID: (field_base, generator)},
        linear={
            (SUBSTATION_ID, FID): linear or LinearPublicData.from_mapping(TOY_LINEAR)
        },
    )


class ListedParameters(PublicParameters):
    """Provider returning whatever it was given, without validation."""

    def __init__(self, threshold=1, servers=3, field_base=23, generator=5):
        self._threshold = threshold
        self._servers = [Server(f"http://localhost:{2000 + i}/") for i in range(servers)]
        self._field = (field_base, generator)
        self._linear = LinearPublicData.from_mapping(TOY_LINEAR)

    @property
    def substation_id(self):
        return SUBSTATION_ID

    @property
    def security_threshold(self):
        return self._threshold

    @property
    def servers(self):
        return list(self._servers)

    def field_base(self, substation_id):
        return self._field[0]

    def generator(self, substation_id):
        return self._field[1]

    def linear_public_data(self, substation_id, fid):
        return self._linear
