"""
アクション実行モジュール

処理計画で作成されたアクション（移動・削除）を実際に実行します。
各アクションは独立して実行され、失敗したアクションがあっても残りは継続します。
移動先に同名ファイルが存在する場合は上書きせずに失敗として扱います。
"""

import logging
import shutil
from typing import List

from .exceptions import ActionFailedError
from .models import Action, ActionResult, ActionType, ExecutionResult


class ActionExecutor:
    """移動・削除アクションを実行するクラス"""

    def __init__(self):
        """ActionExecutorを初期化"""
        self.logger = logging.getLogger(__name__)

    def execute(self, actions: List[Action], dry_run: bool = False,
                progress_logger=None) -> ExecutionResult:
        """
        アクションリストを順に実行

        Args:
            actions: 実行するアクションのリスト
            dry_run: Trueの場合はファイルに触れず、すべてスキップとして報告
            progress_logger: 進捗表示用のProgressLogger（省略可）

        Returns:
            実行結果
        """
        results = []
        errors = []
        success_count = 0
        skipped_count = 0
        failed_count = 0

        self.logger.debug(f"アクション実行開始: {len(actions)}件" + (" (ドライラン)" if dry_run else ""))

        for i, action in enumerate(actions):
            if progress_logger:
                progress_logger.log_action_progress(len(actions), i, action)

            if dry_run:
                self.logger.debug(f"ドライランのためスキップ: {action.source.name}")
                results.append(ActionResult(action, 'skipped'))
                skipped_count += 1
                continue

            try:
                self._execute_single(action)
                results.append(ActionResult(action, 'success'))
                success_count += 1
            except ActionFailedError as e:
                results.append(ActionResult(action, 'failed', e.cause))
                errors.append((action.source, e.cause))
                failed_count += 1

                if progress_logger:
                    progress_logger.log_error(action.source, e.cause)
                else:
                    self.logger.error(f"アクション失敗: {action.source} - {e.cause}")
                    # 失敗しても残りのアクションは継続

        self.logger.debug(
            f"アクション実行完了: 成功={success_count}, "
            f"スキップ={skipped_count}, 失敗={failed_count}"
        )
        return ExecutionResult(
            success=success_count,
            skipped=skipped_count,
            failed=failed_count,
            errors=errors,
            results=results
        )

    def _execute_single(self, action: Action) -> None:
        """
        単一アクションを実行

        Args:
            action: 実行するアクション

        Raises:
            ActionFailedError: 実行に失敗した場合
        """
        source = action.source

        if not source.exists():
            raise ActionFailedError(action, "ソースファイルが存在しません")

        if action.action_type is ActionType.MOVE:
            self._move(action)
        else:
            self._delete(action)

    def _move(self, action: Action) -> None:
        source = action.source
        destination = action.destination

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ActionFailedError(action, f"移動先ディレクトリ作成失敗: {e}") from e

        if destination.exists():
            raise ActionFailedError(action, f"移動先に同名ファイルが存在します: {destination}")

        try:
            shutil.move(str(source), str(destination))
            self.logger.debug(f"移動成功: {source.name} -> {destination}")
        except PermissionError as e:
            raise ActionFailedError(action, f"アクセス権限エラー: {e}") from e
        except OSError as e:
            raise ActionFailedError(action, f"ファイル操作エラー: {e}") from e

    def _delete(self, action: Action) -> None:
        source = action.source
        try:
            source.unlink()
            self.logger.debug(f"削除成功: {source}")
        except PermissionError as e:
            raise ActionFailedError(action, f"アクセス権限エラー: {e}") from e
        except OSError as e:
            raise ActionFailedError(action, f"ファイル操作エラー: {e}") from e
