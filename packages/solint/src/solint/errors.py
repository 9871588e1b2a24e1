from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    GENERIC = "SOLINT_GENERIC_ERROR"
    FILE_NOT_FOUND = "SOLINT_FILE_NOT_FOUND"
    CONFIG_NOT_FOUND = "SOLINT_CONFIG_NOT_FOUND"
    RULE_NOT_REGISTERED = "SOLINT_RULE_NOT_REGISTERED"
    RULE_CONFIG = "SOLINT_RULE_CONFIG"
    CONFIG_ALREADY_EXISTS = "SOLINT_CONFIG_ALREADY_EXISTS"
    UNMATCHED_PATTERN = "SOLINT_UNMATCHED_PATTERN"
    DIRECTORIES_NOT_SUPPORTED = "SOLINT_DIRECTORIES_NOT_SUPPORTED"
    CANT_INFER_SOLIDITY_VERSION = "SOLINT_CANT_INFER_SOLIDITY_VERSION"
    ERROR_LOADING_CONFIG = "SOLINT_ERROR_LOADING_CONFIG"
    INVALID_CONFIG = "SOLINT_INVALID_CONFIG"
    FIX_PRODUCES_INVALID_SYNTAX = "SOLINT_FIX_PRODUCES_INVALID_SYNTAX"
    TOO_MANY_FIX_ITERATIONS = "SOLINT_TOO_MANY_FIX_ITERATIONS"


class SolintError(Exception):
    """Base class for errors meant to be shown to the user as-is"""

    code = ErrorCode.GENERIC

    def __init__(self, message: str, code: Optional[ErrorCode] = None, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.hint = hint


class SourceFileNotFoundError(SolintError):
    code = ErrorCode.FILE_NOT_FOUND

    def __init__(self, source_id: str):
        super().__init__(f"File not found: {source_id}")


class ConfigNotFoundError(SolintError):
    code = ErrorCode.CONFIG_NOT_FOUND

    def __init__(self):
        super().__init__(
            "No solint.toml found in the current directory or any parent directory",
            hint="Run 'solint init' to create a configuration file.",
        )


class RuleNotRegisteredError(SolintError):
    code = ErrorCode.RULE_NOT_REGISTERED

    def __init__(self, rule_name: str):
        super().__init__(f"Rule '{rule_name}' does not exist")
        self.rule_name = rule_name


class RuleConfigError(SolintError):
    code = ErrorCode.RULE_CONFIG

    def __init__(self, rule_name: str, detail: str):
        super().__init__(f"Invalid configuration for rule '{rule_name}': {detail}")
        self.rule_name = rule_name
        self.detail = detail


class ConfigAlreadyExistsError(SolintError):
    code = ErrorCode.CONFIG_ALREADY_EXISTS

    def __init__(self, config_path: str):
        super().__init__(f"Configuration file already exists at '{config_path}'")


class UnmatchedPatternError(SolintError):
    code = ErrorCode.UNMATCHED_PATTERN

    def __init__(self, pattern: str):
        super().__init__(f"No files matched the pattern: '{pattern}'")


class DirectoriesNotSupportedError(SolintError):
    code = ErrorCode.DIRECTORIES_NOT_SUPPORTED

    def __init__(self, directory: str):
        super().__init__(f"Directories are not supported: '{directory}'")


class CantInferSolidityVersionError(SolintError):
    code = ErrorCode.CANT_INFER_SOLIDITY_VERSION

    def __init__(self, source_id: str):
        super().__init__(
            f"Cannot infer Solidity version for source file: {source_id}",
            hint="Check that the version pragmas are correct and that you are using the latest version of solint.",
        )


class ConfigLoadingError(SolintError):
    code = ErrorCode.ERROR_LOADING_CONFIG

    def __init__(self, config_path: str, message: str):
        super().__init__(f"Error loading config at '{config_path}': {message}")


class InvalidConfigError(SolintError):
    code = ErrorCode.INVALID_CONFIG

    def __init__(self, config_path: str, message: str, hint: Optional[str] = None):
        super().__init__(f"Invalid config at '{config_path}': {message}", hint=hint)


class FixProducesInvalidSyntaxError(SolintError):
    code = ErrorCode.FIX_PRODUCES_INVALID_SYNTAX

    def __init__(self, source_id: str):
        super().__init__(
            f"Applying fixes to '{source_id}' produced invalid syntax",
            hint="This is a bug in one of the rules; run without --fix to see the problems.",
        )


class TooManyFixIterationsError(SolintError):
    code = ErrorCode.TOO_MANY_FIX_ITERATIONS

    def __init__(self, source_id: str, iterations: int):
        super().__init__(f"Fixes for '{source_id}' did not converge after {iterations} iterations")
        self.iterations = iterations
