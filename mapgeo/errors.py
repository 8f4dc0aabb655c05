class GeodeticComputationError(Exception):
    """Raised when a geodetic correction or extent cannot be computed.

    The failure that caused it (transform error, solver error, unknown unit,
    missing CRS identifier) is chained as ``__cause__`` and kept on ``cause``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
