from __future__ import annotations


class KDMapError(ValueError):
    pass


class EmptyInputError(KDMapError):
    def __init__(self, msg: str = "KDMap requires at least one (key, value) pair") -> None:
        super().__init__(msg)


class DuplicateKeyError(KDMapError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate key in input: {key!r}")
        self.key = key


class InvalidPairError(KDMapError):
    pass
