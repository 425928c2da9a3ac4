EXIT_OK = 0
EXIT_UNKNOWN = 1
EXIT_PARSE = 2
EXIT_CONFIG = 3
EXIT_UNRESOLVED = 4
EXIT_IO = 5
EXIT_STALE = 6


class TPLError(Exception):
    def __init__(self, message, code=EXIT_UNKNOWN):
        super().__init__(message)
        self.code = code


class ConfigurationError(TPLError):
    def __init__(self, message):
        super().__init__(message, EXIT_CONFIG)


class InventoryError(TPLError):
    def __init__(self, message):
        super().__init__(message, EXIT_PARSE)


class MalformedCoordinate(TPLError):
    def __init__(self, text):
        super().__init__(f"Invalid dependency '{text}'", EXIT_PARSE)
        self.text = text


class UnresolvableLicense(TPLError):
    def __init__(self, coordinate, unknown=()):
        super().__init__(f"License can not be determined for '{coordinate}'", EXIT_UNRESOLVED)
        self.coordinate = coordinate
        self.unknown = tuple(unknown)


class ReportIOError(TPLError):
    def __init__(self, message):
        super().__init__(message, EXIT_IO)


class StaleReportError(TPLError):
    def __init__(self, paths):
        joined = ", ".join(paths)
        super().__init__(f"third party license report out of date: {joined}", EXIT_STALE)
        self.paths = list(paths)
