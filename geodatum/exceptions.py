"""Exceptions raised by geodatum"""

__all__ = ['GeodatumError', 'NonConvergence', 'UnknownDatum', 'UnknownEllipsoid']


class GeodatumError(Exception):
    """Base class for all geodatum errors"""


class UnknownDatum(GeodatumError, ValueError):
    """A datum name was referenced which is not registered"""

    def __init__(self, name: str):
        super().__init__(f'Unknown datum: {name!r}')
        self.name = name


class UnknownEllipsoid(GeodatumError, ValueError):
    """An ellipsoid name was referenced which is not in the catalog"""

    def __init__(self, name: str):
        super().__init__(f'Unknown ellipsoid: {name!r}')
        self.name = name


class NonConvergence(GeodatumError, ArithmeticError):
    """An iterative solver exceeded its iteration cap without converging"""

    def __init__(self, solver: str, iterations: int):
        super().__init__(f'{solver} failed to converge after {iterations} iterations')
        self.solver = solver
        self.iterations = iterations
