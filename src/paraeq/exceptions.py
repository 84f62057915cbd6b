class ParaEqError(Exception):
    pass


class InvalidAstError(ParaEqError, ValueError):
    """Input is not a pandoc JSON document"""


class PandocNotInstalled(ParaEqError, OSError):
    pass


class LatexNotInstalled(ParaEqError):
    pass
