"""
ファイルスキャナー

写真ディレクトリ直下のファイルを一覧化し、分類済みのFileEntryに変換します。
サブディレクトリは検索しません。
"""

import logging
from pathlib import Path
from typing import List, Tuple

from .classifier import FilenameClassifier
from .exceptions import DirectoryUnreadableError
from .models import ExtensionConfig, FileEntry
from .path_validator import PathValidator


class FileScanner:
    """ディレクトリをスキャンしてファイルを一覧化するクラス"""

    def __init__(self, config: ExtensionConfig):
        """
        FileScannerを初期化

        Args:
            config: 拡張子設定
        """
        self.classifier = FilenameClassifier(config)
        self.logger = logging.getLogger(__name__)

    def list_files(self, directory: Path) -> List[Tuple[str, Path]]:
        """
        ディレクトリ直下のファイルを (ファイル名, フルパス) のリストで取得

        Args:
            directory: スキャンするディレクトリ

        Returns:
            ファイル名でソートされたリスト（ディレクトリは含まない）

        Raises:
            ValidationError: ディレクトリが無効な場合
            DirectoryUnreadableError: ディレクトリを読み取れない場合
        """
        PathValidator.validate_directory(directory)

        try:
            children = list(directory.iterdir())
        except OSError as e:
            raise DirectoryUnreadableError(f"ディレクトリを読み取れません: {directory} - {e}") from e

        files = []
        for file_path in children:
            # 非再帰: サブディレクトリは対象外
            if file_path.is_file():
                files.append((file_path.name, file_path))
            else:
                self.logger.debug(f"ファイルではないためスキップ: {file_path.name}")

        return sorted(files)

    def scan_directory(self, directory: Path) -> List[FileEntry]:
        """
        ディレクトリ直下のファイルを分類済みのFileEntryとして取得

        Args:
            directory: スキャンするディレクトリ

        Returns:
            FileEntryのリスト
        """
        entries = [self.classifier.create_entry(path) for _, path in self.list_files(directory)]
        self.logger.debug(f"スキャン完了: {directory} ({len(entries)}ファイル)")
        return entries
