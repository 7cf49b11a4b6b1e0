class DataExplorerError(Exception):
    """Base exception for all data_explorer errors"""
    pass


class ConfigError(DataExplorerError):
    """Invalid or inconsistent global.json or environment override"""
    pass


class LoadError(DataExplorerError):
    """
    The dataset could not be fetched or parsed:
    network failure, bad HTTP status, invalid JSON, unexpected top-level shape
    """
    pass


class DatasetSchemaError(LoadError):
    """
    A record doesn't match what Record expects
    missing keys, non-numeric year/value, etc
    """
    pass
