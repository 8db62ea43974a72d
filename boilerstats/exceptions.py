class BoilerStatsError(Exception): ...


class ConfigError(BoilerStatsError): ...


class IngestError(BoilerStatsError): ...


def require(
    condition: bool, message: str, exc: type[BoilerStatsError] = BoilerStatsError
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
