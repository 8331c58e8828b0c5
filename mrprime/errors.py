class PrimalityError(Exception):
    def __init__(self, message):
        super().__init__(f"Primality test failure: {message}")


class InvalidRoundCount(PrimalityError, ValueError):
    def __init__(self, rounds):
        self.rounds = rounds
        super().__init__(f"rounds must be a positive integer, got {rounds!r}")


class DegenerateRange(PrimalityError, ValueError):
    def __init__(self, num, minimum: int):
        self.num = num
        self.minimum = minimum
        super().__init__(f"no witness range for {num}; need a candidate >= {minimum}")


class InvalidCandidate(PrimalityError, TypeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"candidate must be an integer, got {type(value).__name__} {value!r}")


class ConfigError(PrimalityError):
    def __init__(self, name: str, raw: str, reason: str):
        self.name = name
        self.raw = raw
        super().__init__(f"bad setting {name}={raw!r}: {reason}")
