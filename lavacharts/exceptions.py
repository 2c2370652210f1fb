from typing import Any, Iterable


class LavaChartsException(Exception):
    pass


class InvalidConfigProperty(LavaChartsException):
    def __init__(self, owner: str, key: Any, allowed: Iterable[str] | None = None):
        self.owner = owner
        self.key = key
        self.allowed = sorted(allowed) if allowed is not None else []
        message = f'"{key}" is not a valid configuration property for {owner}.'
        if self.allowed:
            message += f" Valid properties are: {', '.join(self.allowed)}"
        super().__init__(message)
        self.message = message


class InvalidConfigValue(LavaChartsException):
    def __init__(self, owner: str, key: str, expected: str, value: Any = None):
        self.owner = owner
        self.key = key
        self.expected = expected
        self.value = value
        message = f"{owner}.{key} must be {expected}, got {value!r}."
        super().__init__(message)
        self.message = message


class InvalidParamType(LavaChartsException):
    def __init__(self, param: str, expected: str, value: Any = None):
        self.param = param
        self.expected = expected
        self.value = value
        message = f"{param} must be {expected}, got {value!r}."
        super().__init__(message)
        self.message = message


class InvalidLabel(InvalidParamType):
    def __init__(self, value: Any = None):
        super().__init__("Label", "a non-empty string", value)


class InvalidElementId(InvalidParamType):
    def __init__(self, value: Any = None):
        super().__init__("ElementId", "a non-empty string", value)


class InvalidFilterType(LavaChartsException):
    def __init__(self, filter_type: Any, valid: Iterable[str] | None = None):
        self.filter_type = filter_type
        self.valid = sorted(valid) if valid is not None else []
        message = f"{filter_type!r} is not a valid filter type."
        if self.valid:
            message += f" Valid types are: {', '.join(self.valid)}"
        super().__init__(message)
        self.message = message


class InvalidChartType(LavaChartsException):
    def __init__(self, chart_type: Any, valid: Iterable[str] | None = None):
        self.chart_type = chart_type
        self.valid = sorted(valid) if valid is not None else []
        message = f"{chart_type!r} is not a valid chart type."
        if self.valid:
            message += f" Valid types are: {', '.join(self.valid)}"
        super().__init__(message)
        self.message = message


class InvalidDataTable(LavaChartsException):
    pass


class MissingOption(LavaChartsException, KeyError):
    def __init__(self, owner: str, key: str):
        self.owner = owner
        self.key = key
        self.message = f'{owner} has no option "{key}" set and no default for it.'
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
