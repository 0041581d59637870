"""
パス検証ユーティリティ

写真ディレクトリのパス正規化と、存在・アクセス権の検証を提供します。
"""

import os
from pathlib import Path
from typing import Optional

from .exceptions import DirectoryUnreadableError, ValidationError


class PathValidator:
    """パス検証を行うユーティリティクラス"""

    @staticmethod
    def validate_directory(path: Path) -> None:
        """
        ディレクトリの存在と読み取り権限を検証

        Args:
            path: 検証するディレクトリパス

        Raises:
            ValidationError: ディレクトリが存在しない、またはディレクトリではない場合
            DirectoryUnreadableError: 読み取り権限がない場合
        """
        if not path.exists():
            raise ValidationError(f"ディレクトリが存在しません: {path}")

        if not path.is_dir():
            raise ValidationError(f"指定されたパスはディレクトリではありません: {path}")

        if not os.access(path, os.R_OK | os.X_OK):
            raise DirectoryUnreadableError(f"ディレクトリに読み取り権限がありません: {path}")

    @staticmethod
    def validate_writable_directory(path: Path) -> None:
        """
        ファイルの移動・削除が可能なディレクトリかどうかを検証

        Args:
            path: 検証するディレクトリパス

        Raises:
            ValidationError: ディレクトリが無効、または書き込み権限がない場合
        """
        PathValidator.validate_directory(path)

        if not os.access(path, os.W_OK):
            raise ValidationError(f"ディレクトリに書き込み権限がありません: {path}")

    @staticmethod
    def normalize_path(path_str: Optional[str]) -> Path:
        """
        パス文字列を正規化してPathオブジェクトに変換
        空文字列またはNoneの場合はカレントディレクトリを返します。

        Args:
            path_str: パス文字列

        Returns:
            正規化された絶対パス
        """
        if not path_str or not path_str.strip():
            return Path.cwd().resolve()
        return Path(path_str).expanduser().resolve()
