"""
ロギングシステム

photo_toolsのロギング機能を提供します。
標準出力とファイル出力の両方をサポートし、進捗表示とエラーログを管理します。
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .models import (
    Action, ActionType, ExecutionResult, ExtensionConfig, FileClass, FileEntry, ProcessingStats
)


@dataclass
class LogConfig:
    """ログ設定"""
    console_level: int = logging.INFO
    file_level: int = logging.DEBUG
    log_file: Optional[Path] = None
    verbose: bool = False


class ProgressLogger:
    """進捗表示とロギングを管理するクラス"""

    def __init__(self, config: LogConfig):
        self.config = config
        self.logger = self._setup_logger()
        self._start_time: Optional[datetime] = None

    def _setup_logger(self) -> logging.Logger:
        """ロガーのセットアップ"""
        logger = logging.getLogger('photo_tools')
        logger.setLevel(logging.DEBUG)

        # 既存のハンドラーをクリア
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        console_formatter = logging.Formatter('%(message)s')
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.config.console_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if self.config.log_file:
            self.config.log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(self.config.log_file, encoding='utf-8')
            file_handler.setLevel(self.config.file_level)
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

        return logger

    def log_processing_start(self, directory: Path, config: ExtensionConfig,
                             delete: bool, dry_run: bool = False):
        """処理開始時のサマリー表示"""
        self._start_time = datetime.now()

        self.logger.info("=" * 60)
        self.logger.info("photo_tools - 孤立ファイル整理 - 処理開始")
        self.logger.info("=" * 60)
        self.logger.info(f"開始時刻: {self._start_time.strftime('%Y-%m-%d %H:%M:%S')}")
        self.logger.info(f"対象ディレクトリ: {directory}")
        self.logger.info(f"RAW拡張子: {config.raw_ext} / 現像済み画像の拡張子: {config.developed_ext}")

        if config.subject_class is FileClass.RAW:
            self.logger.info(f"検査対象: {config.raw_ext}ファイル（対応する{config.developed_ext}がないもの）")
        else:
            self.logger.info(f"検査対象: {config.developed_ext}ファイル（対応する{config.raw_ext}がないもの）")

        self.logger.info(f"処理方法: {'削除' if delete else '移動'}" + (" (ドライラン)" if dry_run else ""))
        self.logger.info("")

    def log_scan_complete(self, files_found: int, raw_count: int, developed_count: int, other_count: int):
        """ディレクトリスキャン完了のログ"""
        self.logger.info(f"スキャン完了: {files_found}個のファイル")
        self.logger.info(f"  - RAW: {raw_count}個")
        self.logger.info(f"  - 現像済み画像: {developed_count}個")
        self.logger.info(f"  - その他: {other_count}個")

    def log_orphans(self, orphans: List[FileEntry]):
        """孤立ファイル一覧のログ"""
        self.logger.info(f"孤立ファイル: {len(orphans)}個")
        for orphan in orphans:
            self.logger.info(f"  - {orphan.filename}")

    def log_plan(self, actions: List[Action]):
        """処理計画のログ（詳細モードのみ各アクションを表示）"""
        self.logger.info(f"処理予定: {len(actions)}件")
        if not self.config.verbose:
            return
        for action in actions:
            if action.action_type is ActionType.MOVE:
                self.logger.info(f"  移動: {action.source} -> {action.destination}")
            else:
                self.logger.info(f"  削除: {action.source}")

    def log_action_progress(self, total_actions: int, actions_processed: int, action: Optional[Action] = None):
        """アクション実行時の進捗表示"""
        if not self.config.verbose:
            return

        if action:
            label = '移動中' if action.action_type is ActionType.MOVE else '削除中'
            self.logger.info(f"{label}: {action.source.name}")

        if total_actions > 0:
            progress = (actions_processed / total_actions) * 100
            self.logger.info(f"進捗: {actions_processed}/{total_actions} ({progress:.1f}%)")

    def log_execution_complete(self, result: ExecutionResult, processing_time: float):
        """アクション実行完了のログ"""
        self.logger.info("実行完了:")
        self.logger.info(f"  - 成功: {result.success}個")
        self.logger.info(f"  - スキップ: {result.skipped}個")
        self.logger.info(f"  - 失敗: {result.failed}個")
        self.logger.info(f"処理時間: {processing_time:.2f}秒")
        self.logger.info("")

    def log_processing_complete(self, stats: ProcessingStats):
        """処理完了時のサマリー表示"""
        end_time = datetime.now()
        total_time = (end_time - self._start_time).total_seconds() if self._start_time else 0

        self.logger.info("=" * 60)
        self.logger.info("処理完了サマリー")
        self.logger.info("=" * 60)
        self.logger.info(f"終了時刻: {end_time.strftime('%Y-%m-%d %H:%M:%S')}")
        self.logger.info(f"総処理時間: {total_time:.2f}秒")
        self.logger.info("")
        self.logger.info("処理結果:")
        self.logger.info(f"  - ファイル数: {stats.files_found}")
        self.logger.info(f"  - RAWファイル数: {stats.raw_files_found}")
        self.logger.info(f"  - 現像済み画像数: {stats.developed_files_found}")
        self.logger.info(f"  - 孤立ファイル数: {stats.orphans_found}")
        if stats.dry_run:
            self.logger.info(f"  - ドライラン（未実行）: {stats.actions_skipped}")
        else:
            self.logger.info(f"  - 成功: {stats.actions_succeeded}")
            self.logger.info(f"  - 失敗: {stats.actions_failed}")

        if stats.errors:
            self.logger.info("")
            self.logger.info(f"エラー詳細 ({len(stats.errors)}件):")
            for file_path, error_msg in stats.errors:
                self.logger.error(f"  - {file_path}: {error_msg}")

        self.logger.info("=" * 60)

    def log_error(self, file_path: Path, error_message: str, exception: Optional[Exception] = None):
        """エラーログの詳細記録"""
        error_msg = f"エラー - {file_path}: {error_message}"

        if exception:
            error_msg += f" ({type(exception).__name__}: {str(exception)})"

        self.logger.error(error_msg)

        # スタックトレースはファイルログのみ
        if exception and self.config.log_file:
            self.logger.debug("スタックトレース:", exc_info=exception)

    def log_warning(self, message: str):
        """警告メッセージのログ"""
        self.logger.warning(f"警告: {message}")

    def log_info(self, message: str):
        """情報メッセージのログ"""
        self.logger.info(message)


def create_default_logger(verbose: bool = False, log_file: Optional[Path] = None) -> ProgressLogger:
    """デフォルトのロガーを作成"""
    config = LogConfig(
        console_level=logging.DEBUG if verbose else logging.INFO,
        file_level=logging.DEBUG,
        log_file=log_file,
        verbose=verbose
    )
    return ProgressLogger(config)


def get_default_log_file() -> Path:
    """デフォルトのログファイルパスを取得"""
    log_dir = Path.home() / '.photo_tools' / 'logs'
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return log_dir / f'photo_tools_{timestamp}.log'
