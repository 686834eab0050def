class InvalidBodyOrder(ValueError):
    """Body order is not supported for a multi-body term or transform"""


class DegreeUndefinedOnMixedTerm(ValueError):
    """Degree requested for a term built from more than one tuple"""


class UnknownSymbol(ValueError):
    """Transform or cut-off name not present in a registry"""


class NonSerializableDictionary(RuntimeError):
    """Dictionary was constructed without symbolic names"""


class NumericCorruption(RuntimeError):
    """Non-finite values found in an assembled result"""
