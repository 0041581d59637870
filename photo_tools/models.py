"""
データモデル定義

photo_toolsで使用するデータクラスを定義します。
拡張子設定（ExtensionConfig）は起動時に一度だけ作成され、
各処理に明示的に渡されます。
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set, Tuple

from .exceptions import InvalidConfigError


DEFAULT_RAW_EXT = 'RAF'
DEFAULT_DEVELOPED_EXT = 'JPG'

# コマンドラインのモード名 -> 対象クラス名
MODE_NAMES = {
    'IMG': 'DEVELOPED',
    'RAW': 'RAW',
}


class FileClass(Enum):
    """ファイルの分類"""
    RAW = 'RAW'
    DEVELOPED = 'DEVELOPED'
    OTHER = 'OTHER'


class ActionType(Enum):
    """アクションの種類"""
    MOVE = 'MOVE'
    DELETE = 'DELETE'


def _normalize_extension(ext: Optional[str]) -> str:
    """拡張子から前後の空白と先頭のドットを取り除く"""
    if ext is None:
        return ''
    ext = ext.strip()
    if ext.startswith('.'):
        ext = ext[1:]
    return ext


# 拡張子に含めることのできない文字（ファイル名の最後のドット以降と一致しなくなるもの）
_FORBIDDEN_EXTENSION_CHARS = set('./\\*?[]')


def _validate_extension(ext: str, label: str) -> None:
    """拡張子がファイル名の最後のドット以降の1語として一致し得るか検証"""
    if not ext:
        raise InvalidConfigError(f"{label}が空です")
    bad = sorted({c for c in ext if c in _FORBIDDEN_EXTENSION_CHARS or c.isspace()})
    if bad:
        raise InvalidConfigError(
            f"{label}に使用できない文字が含まれています: {ext} ({' '.join(repr(c) for c in bad)})"
        )


@dataclass(frozen=True)
class ExtensionConfig:
    """
    拡張子設定

    raw_ext と developed_ext は空でなく、大文字小文字を区別せずに
    互いに異なる必要があります。先頭のドットは取り除かれ、残りにドット、
    パス区切り文字、空白、ワイルドカード文字を含む拡張子は拒否されます。subject_class は孤立ファイルを探す対象の分類です。
    """
    raw_ext: str = DEFAULT_RAW_EXT
    developed_ext: str = DEFAULT_DEVELOPED_EXT
    subject_class: FileClass = FileClass.DEVELOPED
    ignore_case: bool = False  # Trueの場合、ベースIDを小文字で比較

    def __post_init__(self):
        raw_ext = _normalize_extension(self.raw_ext)
        developed_ext = _normalize_extension(self.developed_ext)

        _validate_extension(raw_ext, "RAW拡張子")
        _validate_extension(developed_ext, "現像済み画像の拡張子")
        if raw_ext.lower() == developed_ext.lower():
            raise InvalidConfigError(
                f"RAW拡張子と現像済み画像の拡張子が同じです: {raw_ext} / {developed_ext}"
            )
        if self.subject_class not in (FileClass.RAW, FileClass.DEVELOPED):
            raise InvalidConfigError(f"対象クラスが不正です: {self.subject_class}")

        object.__setattr__(self, 'raw_ext', raw_ext)
        object.__setattr__(self, 'developed_ext', developed_ext)

    @classmethod
    def from_mode(cls, mode: str, raw_ext: Optional[str] = None,
                  developed_ext: Optional[str] = None,
                  ignore_case: bool = False) -> 'ExtensionConfig':
        """
        処理モード名（IMG または RAW）から設定を作成

        Args:
            mode: 'IMG'（現像済み画像を検査）または 'RAW'（RAWファイルを検査）
            raw_ext: RAW拡張子（省略時はRAF）
            developed_ext: 現像済み画像の拡張子（省略時はJPG）
            ignore_case: ベースIDの大文字小文字を無視する場合True

        Returns:
            ExtensionConfig

        Raises:
            InvalidConfigError: モード名や拡張子が不正な場合
        """
        class_name = MODE_NAMES.get((mode or '').strip().upper())
        if class_name is None:
            raise InvalidConfigError(f"不明なモードです: {mode}（IMG または RAW を指定してください）")

        return cls(
            raw_ext=DEFAULT_RAW_EXT if raw_ext is None else raw_ext,
            developed_ext=DEFAULT_DEVELOPED_EXT if developed_ext is None else developed_ext,
            subject_class=FileClass[class_name],
            ignore_case=ignore_case
        )

    @property
    def opposite_class(self) -> FileClass:
        """対象クラスの対になる分類"""
        if self.subject_class is FileClass.RAW:
            return FileClass.DEVELOPED
        return FileClass.RAW

    @property
    def subject_ext(self) -> str:
        """対象クラスの拡張子"""
        if self.subject_class is FileClass.RAW:
            return self.raw_ext
        return self.developed_ext


@dataclass(frozen=True)
class FileEntry:
    """ディレクトリ内で見つかった1ファイル"""
    base_id: str  # 最後のドットより前の部分
    extension: str  # 見つかったままの拡張子（ドットなし）
    full_path: Path
    file_class: FileClass = FileClass.OTHER

    @property
    def filename(self) -> str:
        return self.full_path.name


@dataclass
class BaseGroup:
    """同じベースIDを持つファイルのグループ"""
    base_id: str
    entries: List[FileEntry] = field(default_factory=list)

    @property
    def classes(self) -> Set[FileClass]:
        return {entry.file_class for entry in self.entries}

    def has(self, file_class: FileClass) -> bool:
        return any(entry.file_class is file_class for entry in self.entries)


@dataclass(frozen=True)
class Action:
    """孤立ファイルに対する処理（移動または削除）"""
    action_type: ActionType
    source: Path
    destination: Optional[Path] = None  # DELETEの場合はNone


@dataclass
class ActionResult:
    """アクションの実行結果"""
    action: Action
    status: str  # 'success', 'skipped', 'failed'
    error: Optional[str] = None


@dataclass
class ExecutionResult:
    """アクション一括実行の結果"""
    success: int
    skipped: int
    failed: int
    errors: List[Tuple[Path, str]]
    results: List[ActionResult] = field(default_factory=list)


@dataclass
class ProcessingStats:
    """処理統計情報"""
    files_found: int
    raw_files_found: int
    developed_files_found: int
    other_files_found: int
    orphans_found: int
    actions_planned: int
    actions_succeeded: int
    actions_skipped: int
    actions_failed: int
    errors: List[Tuple[str, str]]  # (file_path, error_message)
    dry_run: bool = False
