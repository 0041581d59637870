"""
ファイル名分類モジュール

ファイル名からベースIDと拡張子を取り出し、RAW / 現像済み画像 / その他 に分類します。

ベースIDは「最後のドットより前」の部分です。編集済みの書き出しファイルでは
ファイル名に複数のドットが含まれることが多いため、これは意図した仕様です。
例: IMG.edit.RAF -> ベースID 'IMG.edit'、拡張子 'RAF'
"""

from pathlib import Path, PurePath
from typing import Tuple, Union

from .models import ExtensionConfig, FileClass, FileEntry


def split_filename(filename: Union[str, PurePath]) -> Tuple[str, str]:
    """
    ファイル名を最後のドットでステムと拡張子に分割

    ディレクトリ部分が含まれる場合は最後の要素のみを対象とします。
    ドットがない場合、または先頭のドットのみの場合（.hidden など）は
    全体がステムで拡張子は空になります。

    Args:
        filename: ファイル名またはパス

    Returns:
        (ステム, 拡張子) のタプル。拡張子にドットは含まない
    """
    name = PurePath(filename).name
    stem, dot, extension = name.rpartition('.')
    if not dot or not stem:
        return name, ''
    return stem, extension


def classify(filename: Union[str, PurePath], config: ExtensionConfig) -> Tuple[str, FileClass]:
    """
    ファイル名をベースIDと分類に変換

    拡張子は大文字小文字を区別せずに比較します。どの拡張子にも一致しない
    ファイル（拡張子なしを含む）は FileClass.OTHER になり、例外は発生しません。

    Args:
        filename: ファイル名またはパス
        config: 拡張子設定

    Returns:
        (ベースID, 分類) のタプル
    """
    stem, extension = split_filename(filename)
    base_id = stem.lower() if config.ignore_case else stem

    ext = extension.lower()
    if not ext:
        return base_id, FileClass.OTHER
    if ext == config.raw_ext.lower():
        return base_id, FileClass.RAW
    if ext == config.developed_ext.lower():
        return base_id, FileClass.DEVELOPED
    return base_id, FileClass.OTHER


class FilenameClassifier:
    """拡張子設定に基づいてFileEntryを作成するクラス"""

    def __init__(self, config: ExtensionConfig):
        self.config = config

    def classify(self, filename: Union[str, PurePath]) -> Tuple[str, FileClass]:
        return classify(filename, self.config)

    def create_entry(self, full_path: Union[str, Path]) -> FileEntry:
        """
        パスからFileEntryを作成

        Args:
            full_path: ファイルのパス

        Returns:
            分類済みのFileEntry
        """
        full_path = Path(full_path)
        base_id, file_class = classify(full_path.name, self.config)
        _, extension = split_filename(full_path.name)
        return FileEntry(
            base_id=base_id,
            extension=extension,
            full_path=full_path,
            file_class=file_class
        )
