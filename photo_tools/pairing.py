"""
ペアリング処理モジュール

ディレクトリ内のファイル一覧をベースIDでグループ化し、
対になるファイル（RAW <-> 現像済み画像）が存在しない対象クラスのファイル、
つまり孤立ファイルを検出します。

判定はグループ単位で行います。同じベースIDに同じ分類のファイルが複数ある場合も、
反対側の分類のファイルが1つでもあれば、どれも孤立ファイルにはなりません。
その他（OTHER）のファイルはペアの成立・不成立に一切影響しません。
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from .classifier import FilenameClassifier, split_filename
from .models import BaseGroup, ExtensionConfig, FileClass, FileEntry

EntryLike = Union[FileEntry, Tuple[str, Union[str, Path]]]


def _classify_entries(entries: Iterable[EntryLike], config: ExtensionConfig) -> List[FileEntry]:
    """入力をすべて設定に従って分類し直したFileEntryのリストにする"""
    classifier = FilenameClassifier(config)
    classified = []
    for item in entries:
        if isinstance(item, FileEntry):
            classified.append(classifier.create_entry(item.full_path))
        else:
            # 一覧から渡される (ファイル名, フルパス) のペア
            filename, full_path = item
            base_id, file_class = classifier.classify(filename)
            classified.append(FileEntry(
                base_id=base_id,
                extension=split_filename(filename)[1],
                full_path=Path(full_path),
                file_class=file_class
            ))
    return classified


def group_entries(entries: Iterable[EntryLike], config: ExtensionConfig) -> Dict[str, BaseGroup]:
    """
    ファイルをベースIDごとにグループ化

    Args:
        entries: FileEntry または (ファイル名, フルパス) のシーケンス
        config: 拡張子設定

    Returns:
        ベースID -> BaseGroup の辞書
    """
    groups: Dict[str, BaseGroup] = {}
    for entry in _classify_entries(entries, config):
        group = groups.get(entry.base_id)
        if group is None:
            group = BaseGroup(base_id=entry.base_id)
            groups[entry.base_id] = group
        group.entries.append(entry)
    return groups


def find_orphans(entries: Iterable[EntryLike], config: ExtensionConfig) -> List[FileEntry]:
    """
    対になるファイルが存在しない対象クラスのファイルを検出

    Args:
        entries: FileEntry または (ファイル名, フルパス) のシーケンス。順序は問わない
        config: 拡張子設定

    Returns:
        孤立ファイルのリスト（ベースID、ファイル名の順でソート済み）
    """
    subject = config.subject_class
    opposite = config.opposite_class

    orphans = []
    for group in group_entries(entries, config).values():
        if group.has(opposite):
            continue
        orphans.extend(e for e in group.entries if e.file_class is subject)

    return sorted(orphans, key=lambda e: (e.base_id, e.filename))


class PairingEngine:
    """孤立ファイル検出を行うクラス"""

    def __init__(self, config: ExtensionConfig):
        """
        PairingEngineを初期化

        Args:
            config: 拡張子設定
        """
        self.config = config
        self.logger = logging.getLogger(__name__)

    def find_orphans(self, entries: Iterable[EntryLike]) -> List[FileEntry]:
        entries = list(entries)
        self.logger.debug(
            f"ペアリング開始: {len(entries)}個のファイル "
            f"(対象: {self.config.subject_class.value}, "
            f"RAW={self.config.raw_ext}, 現像済み={self.config.developed_ext})"
        )

        orphans = find_orphans(entries, self.config)

        for orphan in orphans:
            self.logger.debug(f"対になるファイルなし: {orphan.filename}")

        self.logger.debug(f"ペアリング完了: {len(orphans)}個の孤立ファイル")
        return orphans

    def group_entries(self, entries: Iterable[EntryLike]) -> Dict[str, BaseGroup]:
        return group_entries(entries, self.config)

    def get_pairing_statistics(self, groups: Dict[str, BaseGroup]) -> dict:
        """
        グループ化結果の統計情報を取得

        Args:
            groups: group_entries の結果

        Returns:
            統計情報の辞書
        """
        paired = raw_only = developed_only = other_only = 0
        for group in groups.values():
            has_raw = group.has(FileClass.RAW)
            has_developed = group.has(FileClass.DEVELOPED)
            if has_raw and has_developed:
                paired += 1
            elif has_raw:
                raw_only += 1
            elif has_developed:
                developed_only += 1
            else:
                other_only += 1

        return {
            'total_groups': len(groups),
            'paired': paired,
            'raw_only': raw_only,
            'developed_only': developed_only,
            'other_only': other_only
        }
