class PluralizerError(Exception):
    pass


class EmptyInputError(PluralizerError):
    pass


class InvalidCountError(PluralizerError):
    pass


class InvalidRuleError(PluralizerError):
    pass
