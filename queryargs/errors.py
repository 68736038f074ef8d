class QueryArgsError(Exception):
    pass


class ConfigError(QueryArgsError):
    def __init__(self, message: str):
        super().__init__(f"Config error: {message}")


class MissingParameterError(QueryArgsError):
    def __init__(self, name: str):
        super().__init__(f"Missing required parameter: {name}")


class UnsupportedMethodError(QueryArgsError):
    def __init__(self, method: str):
        super().__init__(f"Unsupported HTTP method: {method}")
