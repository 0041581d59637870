# photo_tools
# A Python tool to find orphan RAW / developed image files in a photo folder

__version__ = '0.1.0'

from .models import (
    FileClass, ActionType, ExtensionConfig, FileEntry, BaseGroup, Action,
    ActionResult, ExecutionResult, ProcessingStats
)
from .exceptions import (
    ProcessingError, ValidationError, InvalidConfigError, DirectoryUnreadableError,
    FileOperationError, ActionFailedError
)
from .classifier import FilenameClassifier, classify, split_filename
from .pairing import PairingEngine, find_orphans, group_entries
from .planner import DispositionMode, DispositionPlanner, plan, DEFAULT_DEST_SUBDIR
from .path_validator import PathValidator
from .file_scanner import FileScanner
from .executor import ActionExecutor
from .logger import ProgressLogger, LogConfig, create_default_logger, get_default_log_file
from .cleanup_manager import CleanupManager

__all__ = [
    'FileClass',
    'ActionType',
    'ExtensionConfig',
    'FileEntry',
    'BaseGroup',
    'Action',
    'ActionResult',
    'ExecutionResult',
    'ProcessingStats',
    'ProcessingError',
    'ValidationError',
    'InvalidConfigError',
    'DirectoryUnreadableError',
    'FileOperationError',
    'ActionFailedError',
    'FilenameClassifier',
    'classify',
    'split_filename',
    'PairingEngine',
    'find_orphans',
    'group_entries',
    'DispositionMode',
    'DispositionPlanner',
    'plan',
    'DEFAULT_DEST_SUBDIR',
    'PathValidator',
    'FileScanner',
    'ActionExecutor',
    'ProgressLogger',
    'LogConfig',
    'create_default_logger',
    'get_default_log_file',
    'CleanupManager'
]
