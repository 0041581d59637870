"""
孤立ファイル整理管理モジュール

ディレクトリのスキャン、孤立ファイルの検出、処理計画の作成、
アクションの実行までの一連の処理を統合的に管理します。
"""

import time
from pathlib import Path

from .executor import ActionExecutor
from .file_scanner import FileScanner
from .logger import create_default_logger, get_default_log_file
from .models import ExtensionConfig, FileClass, ProcessingStats
from .pairing import PairingEngine
from .path_validator import PathValidator
from .planner import DispositionMode, DispositionPlanner


class CleanupManager:
    """孤立ファイルの整理処理を担当するクラス"""

    def __init__(self):
        """CleanupManagerを初期化"""
        self.executor = ActionExecutor()
        self.progress_logger = None

    def clean_orphans(self, directory: Path, config: ExtensionConfig,
                      mode: DispositionMode = DispositionMode(),
                      dry_run: bool = False, verbose: bool = False) -> ProcessingStats:
        """
        ディレクトリ内の孤立ファイルを検出して移動または削除

        Args:
            directory: 写真ファイルのディレクトリ
            config: 拡張子設定
            mode: 処理方法（移動または削除）
            dry_run: Trueの場合は計画の表示のみ行う
            verbose: 詳細ログを表示する場合True

        Returns:
            処理統計情報

        Raises:
            ValidationError: ディレクトリが無効な場合
        """
        log_file = get_default_log_file() if verbose else None
        self.progress_logger = create_default_logger(verbose=verbose, log_file=log_file)

        self.progress_logger.log_processing_start(directory, config, mode.is_delete, dry_run)

        try:
            if dry_run:
                PathValidator.validate_directory(directory)
            else:
                PathValidator.validate_writable_directory(directory)

            # 1. ディレクトリのスキャン
            scanner = FileScanner(config)
            entries = scanner.scan_directory(directory)

            raw_count = sum(1 for e in entries if e.file_class is FileClass.RAW)
            developed_count = sum(1 for e in entries if e.file_class is FileClass.DEVELOPED)
            other_count = len(entries) - raw_count - developed_count
            self.progress_logger.log_scan_complete(len(entries), raw_count, developed_count, other_count)

            subject_count = raw_count if config.subject_class is FileClass.RAW else developed_count
            if subject_count == 0:
                self.progress_logger.log_warning(
                    f"検査対象の{config.subject_ext}ファイルが見つかりません。拡張子の指定を確認してください。"
                )

            # 2. 孤立ファイルの検出
            engine = PairingEngine(config)
            orphans = engine.find_orphans(entries)

            if verbose:
                pairing_stats = engine.get_pairing_statistics(engine.group_entries(entries))
                self.progress_logger.log_info(f"  ペア成立: {pairing_stats['paired']}個")
                self.progress_logger.log_info(f"  RAWのみ: {pairing_stats['raw_only']}個")
                self.progress_logger.log_info(f"  現像済み画像のみ: {pairing_stats['developed_only']}個")

            self.progress_logger.log_orphans(orphans)

            stats = ProcessingStats(
                files_found=len(entries),
                raw_files_found=raw_count,
                developed_files_found=developed_count,
                other_files_found=other_count,
                orphans_found=len(orphans),
                actions_planned=0,
                actions_succeeded=0,
                actions_skipped=0,
                actions_failed=0,
                errors=[],
                dry_run=dry_run
            )

            if not orphans:
                self.progress_logger.log_info("孤立ファイルは見つかりませんでした。")
                self.progress_logger.log_processing_complete(stats)
                return stats

            # 3. 処理計画の作成
            actions = DispositionPlanner(mode).plan(orphans)
            self.progress_logger.log_plan(actions)
            stats.actions_planned = len(actions)

            # 4. アクションの実行
            start_time = time.time()
            result = self.executor.execute(actions, dry_run, self.progress_logger)
            self.progress_logger.log_execution_complete(result, time.time() - start_time)

            stats.actions_succeeded = result.success
            stats.actions_skipped = result.skipped
            stats.actions_failed = result.failed
            stats.errors = [(str(path), message) for path, message in result.errors]

            self.progress_logger.log_processing_complete(stats)

            if not mode.is_delete and not dry_run and result.success:
                self.progress_logger.log_info(
                    f"移動したファイルは次のフォルダにあります: {directory / mode.dest_subdir}"
                )

            return stats

        except Exception as e:
            self.progress_logger.log_error(directory, f"整理処理エラー: {e}", e)
            raise
