"""
Dodgekit Logging System

Provides consistent console logging for games and the runtime, with
per-module log levels configured from the environment.

Structured Record Logging:
    Besides console messages, modules can emit structured records
    (session start/end, final scores) that are routed to a sink. The
    default sink for an enabled module is a FileSink writing JSONL.

Usage:
    from dodgekit.logging import get_logger

    log = get_logger('cosmic_dodge')
    log.debug("Spawned asteroid at %.1f", x)
    log.info("Session started")

    # Structured records
    from dodgekit.logging import emit_record
    emit_record('session', {'type': 'session_end', 'score': 42})

Configuration:
    Environment variables:
        DODGE_LOG_LEVEL=DEBUG            # Global default level
        DODGE_LOG_COSMIC_DODGE=DEBUG     # Module-specific level
        DODGE_LOG_DIR=/tmp/dodge-logs    # JSONL output directory

        # Module-specific structured logging
        DODGE_LOGGING_SESSION_ENABLED=true

    Or programmatically:
        from dodgekit.logging import configure_logging
        configure_logging(level='DEBUG', modules={'scheduler': 'INFO'})
"""

import json
import os
import sys
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


# =============================================================================
# Sink-Based Structured Logging
# =============================================================================

class LogSink(ABC):
    """
    Abstract base class for log record sinks.

    Sinks receive structured log records and write them to their destination.
    """

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """
        Emit a structured log record.

        Args:
            module: Module name (e.g., 'session')
            record: Structured data to log (must be JSON-serializable)
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        pass


class FileSink(LogSink):
    """
    Writes structured records as JSONL, one file per module.

    A module's file is opened on its first record and starts with a
    header line; close() appends a footer line to every open file.

    Args:
        log_dir: Directory for log files (default: get_log_dir())
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        session_name: Optional[str] = None,
    ):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}
        self._paths: Dict[str, Path] = {}

    def _open(self, module: str) -> TextIO:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        self._log_dir.mkdir(parents=True, exist_ok=True)

        path = self._log_dir / f"{self._session_name}_{module}.jsonl"
        handle = open(path, 'a')
        self._write(handle, {
            "type": "header",
            "module": module,
            "session_name": self._session_name,
            "start_time": time.time(),
        })
        self._files[module] = handle
        self._paths[module] = path
        return handle

    @staticmethod
    def _write(handle: TextIO, record: Dict[str, Any]) -> None:
        handle.write(json.dumps(record) + "\n")
        handle.flush()

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Append a record, stamped with wall_time unless it has one."""
        handle = self._files.get(module) or self._open(module)
        self._write(handle, {'wall_time': time.time(), **record})

    def close(self) -> None:
        for module, handle in self._files.items():
            self._write(handle, {"type": "footer", "module": module, "end_time": time.time()})
            handle.close()
        self._files.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files written so far, by module."""
        return dict(self._paths)


class NullSink(LogSink):
    """No-op sink when structured logging is disabled."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


# Sink registry - active sinks by module
_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Register a sink for a specific module."""
    _sinks[module] = sink


def get_sink(module: str) -> Optional[LogSink]:
    """Get the sink registered for a module, if any."""
    return _sinks.get(module)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Emit a structured log record to the appropriate sink.

    Args:
        module: Module name (e.g., 'session')
        record: Structured data to log (must be JSON-serializable)

    Returns:
        True if record was emitted, False if no sink available
    """
    sink = get_sink(module)
    if sink:
        sink.emit(module, record)
        return True
    return False


def close_all_sinks() -> None:
    """Close all registered sinks."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_module(
    module: str,
    session_name: Optional[str] = None,
) -> LogSink:
    """
    Create the sink configured for a module.

    Returns a FileSink when DODGE_LOGGING_<MODULE>_ENABLED is set,
    otherwise a NullSink.
    """
    config = get_module_config(module)
    if not config.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=config.get('dir'), session_name=session_name)


# =============================================================================
# Global configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'log_dir': None,         # Override log directory (None = platform default)
    'modules': {},           # Per-module settings (hierarchical)
}


def get_log_dir() -> str:
    """Get the log directory.

    Priority:
    1. Configured log_dir (from DODGE_LOG_DIR at import time)
    2. DODGE_LOG_DIR environment variable
    3. Platform-specific user data directory:
       - macOS: ~/Library/Application Support/Dodgekit/logs
       - Windows: %APPDATA%/Dodgekit/logs
       - Linux: ~/.local/share/dodgekit/logs
    """
    if _config.get('log_dir'):
        return str(Path(_config['log_dir']).expanduser())

    env_dir = os.environ.get('DODGE_LOG_DIR')
    if env_dir:
        return str(Path(env_dir).expanduser())

    if sys.platform == 'darwin':
        user_data = Path.home() / 'Library' / 'Application Support' / 'Dodgekit'
    elif sys.platform == 'win32':
        user_data = Path(os.environ.get('APPDATA', str(Path.home()))) / 'Dodgekit'
    else:
        xdg_data = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
        user_data = Path(xdg_data) / 'dodgekit'

    return str(user_data / 'logs')


def get_module_config(module: str) -> Dict[str, Any]:
    """Get structured-logging configuration for a module.

    DODGE_LOGGING_SESSION_ENABLED=true maps to {'enabled': True}
    under modules['session'].
    """
    return _config.get('modules', {}).get(module.lower(), {})


def _set_nested(d: Dict, keys: list, value: Any) -> None:
    """Set a value in a nested dict, creating intermediate dicts as needed."""
    for key in keys[:-1]:
        d = d.setdefault(key, {})
    d[keys[-1]] = value


def _parse_env_value(value: str) -> Any:
    """Parse environment variable value to appropriate type."""
    lower = value.lower()
    if lower in ('true', '1', 'yes', 'on'):
        return True
    if lower in ('false', '0', 'no', 'off'):
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    Supports two prefixes:
    - DODGE_LOG_*: Log levels (DODGE_LOG_SCHEDULER=DEBUG)
    - DODGE_LOGGING_*: Module settings (DODGE_LOGGING_SESSION_ENABLED=true)
    """
    if 'DODGE_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['DODGE_LOG_LEVEL'])

    if 'DODGE_LOG_DIR' in os.environ:
        _config['log_dir'] = os.environ['DODGE_LOG_DIR']

    reserved = ('DODGE_LOG_LEVEL', 'DODGE_LOG_DIR')
    for key, value in os.environ.items():
        if key.startswith('DODGE_LOG_') and key not in reserved:
            module_name = key[10:].lower()  # Remove 'DODGE_LOG_' prefix
            _config['module_levels'][module_name] = _level_from_string(value)

    for key, value in os.environ.items():
        if key.startswith('DODGE_LOGGING_'):
            parts = key[14:].lower().split('_')  # Remove 'DODGE_LOGGING_' prefix
            if len(parts) >= 2:
                module = parts[0]
                if module not in _config['modules']:
                    _config['modules'][module] = {}
                _set_nested(_config['modules'][module], parts[1:], _parse_env_value(value))


# Load env config on import
_load_env_config()


class DodgeLogger:
    """
    Logger for a specific module.

    Messages are printed as "[module] LEVEL: message" when the module's
    effective level allows them.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level would be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (per-frame detail)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> DodgeLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.
    """
    return DodgeLogger(module)