"""
処理計画モジュール

孤立ファイルのリストから、移動または削除のアクションリストを作成します。
このモジュールはファイルシステムに一切アクセスしません。
移動先ディレクトリの作成はActionExecutorが行います。
"""

from dataclasses import dataclass
from typing import Iterable, List

from .exceptions import InvalidConfigError
from .models import Action, ActionType, FileEntry


DEFAULT_DEST_SUBDIR = 'to_delete'


@dataclass(frozen=True)
class DispositionMode:
    """孤立ファイルの処理方法（移動または削除）"""
    action_type: ActionType = ActionType.MOVE
    dest_subdir: str = DEFAULT_DEST_SUBDIR

    def __post_init__(self):
        if self.action_type is ActionType.MOVE:
            name = self.dest_subdir
            if not name or name.strip() != name or name in ('.', '..') \
                    or '/' in name or '\\' in name:
                raise InvalidConfigError(f"移動先サブディレクトリ名が不正です: '{name}'")

    @classmethod
    def move(cls, dest_subdir: str = DEFAULT_DEST_SUBDIR) -> 'DispositionMode':
        return cls(ActionType.MOVE, dest_subdir)

    @classmethod
    def delete(cls) -> 'DispositionMode':
        return cls(ActionType.DELETE)

    @property
    def is_delete(self) -> bool:
        return self.action_type is ActionType.DELETE


def plan(orphans: Iterable[FileEntry], mode: DispositionMode) -> List[Action]:
    """
    孤立ファイルに対するアクションリストを作成

    MOVEモードでは、各ファイルを同じディレクトリ内のサブディレクトリへ
    移動するアクションを作成します。DELETEモードでは削除アクションを作成します。

    Args:
        orphans: 孤立ファイルのリスト
        mode: 処理方法

    Returns:
        アクションのリスト（入力と同じ順序）
    """
    actions = []
    for orphan in orphans:
        source = orphan.full_path
        if mode.is_delete:
            actions.append(Action(ActionType.DELETE, source))
        else:
            destination = source.parent / mode.dest_subdir / source.name
            actions.append(Action(ActionType.MOVE, source, destination))
    return actions


class DispositionPlanner:
    """処理方法を保持してアクションリストを作成するクラス"""

    def __init__(self, mode: DispositionMode = DispositionMode()):
        self.mode = mode

    def plan(self, orphans: Iterable[FileEntry]) -> List[Action]:
        return plan(orphans, self.mode)
