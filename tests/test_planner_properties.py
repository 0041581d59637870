"""
DispositionPlannerのプロパティベーステスト

Property 8: 処理計画の純粋性を検証します。
"""

import os
from pathlib import Path
from unittest.mock import patch
from hypothesis import given, strategies as st
from hypothesis import settings
import pytest

from photo_tools.classifier import FilenameClassifier
from photo_tools.exceptions import InvalidConfigError
from photo_tools.models import Action, ActionType, ExtensionConfig, FileClass
from photo_tools.pairing import find_orphans
from photo_tools.planner import DEFAULT_DEST_SUBDIR, DispositionMode, DispositionPlanner, plan


safe_name_strategy = st.text(
    alphabet=st.characters(
        whitelist_categories=('Lu', 'Ll', 'Nd'),
        min_codepoint=48,
        max_codepoint=122
    ),
    min_size=1,
    max_size=12
)


@st.composite
def orphan_list_strategy(draw):
    """孤立ファイル（JPG）のリストを生成"""
    base_ids = draw(st.lists(safe_name_strategy, max_size=15, unique=True))
    directory = Path('/photos') / draw(safe_name_strategy)
    classifier = FilenameClassifier(ExtensionConfig())
    return [classifier.create_entry(directory / f"{base_id}.JPG") for base_id in base_ids]


mode_strategy = st.one_of(
    st.just(DispositionMode.delete()),
    safe_name_strategy.map(DispositionMode.move)
)


@settings(max_examples=100)
@given(orphan_list_strategy(), mode_strategy)
def test_plan_is_pure_property(orphans, mode):
    """
    **Feature: photo-tools, Property 8: 処理計画の純粋性**

    任意の孤立ファイルのリストと処理方法に対して、planを2回呼び出した結果は
    同一であり、ファイルシステムには一切アクセスしないべきである。
    """
    with patch('pathlib.Path.mkdir') as mock_mkdir, \
            patch('pathlib.Path.exists') as mock_exists, \
            patch('os.rename') as mock_rename, \
            patch('os.unlink') as mock_unlink:
        first = plan(orphans, mode)
        second = plan(orphans, mode)

    assert first == second
    assert len(first) == len(orphans)
    mock_mkdir.assert_not_called()
    mock_exists.assert_not_called()
    mock_rename.assert_not_called()
    mock_unlink.assert_not_called()

    for orphan, action in zip(orphans, first):
        assert action.source == orphan.full_path
        if mode.is_delete:
            assert action.action_type is ActionType.DELETE
            assert action.destination is None
        else:
            assert action.action_type is ActionType.MOVE
            assert action.destination == orphan.full_path.parent / mode.dest_subdir / orphan.filename


def test_move_plan_for_orphan_jpg():
    """to_deleteへの移動計画"""
    filenames = [
        'DSCF5341.JPG', 'DSCF5356.JPG', 'DSCF5356.RAF', 'DSCF5357.JPG',
        'DSCF5357.RAF', 'DSCF5358.JPG', 'DSCF5358.RAF', 'DSCF5359.RAF',
    ]
    config = ExtensionConfig(subject_class=FileClass.DEVELOPED)
    classifier = FilenameClassifier(config)
    entries = [classifier.create_entry(Path('/photos/2024') / name) for name in filenames]

    actions = plan(find_orphans(entries, config), DispositionMode.move('to_delete'))

    assert actions == [
        Action(
            ActionType.MOVE,
            Path('/photos/2024/DSCF5341.JPG'),
            Path('/photos/2024/to_delete/DSCF5341.JPG')
        )
    ]


def test_delete_plan():
    """削除計画"""
    classifier = FilenameClassifier(ExtensionConfig())
    orphans = [classifier.create_entry('/photos/A.JPG'), classifier.create_entry('/photos/B.JPG')]

    actions = plan(orphans, DispositionMode.delete())

    assert actions == [
        Action(ActionType.DELETE, Path('/photos/A.JPG')),
        Action(ActionType.DELETE, Path('/photos/B.JPG')),
    ]


def test_empty_plan():
    """孤立ファイルがなければアクションもない"""
    assert plan([], DispositionMode()) == []
    assert plan([], DispositionMode.delete()) == []


def test_default_mode_is_move_to_delete():
    """デフォルトはto_deleteへの移動"""
    mode = DispositionMode()

    assert mode.action_type is ActionType.MOVE
    assert mode.dest_subdir == DEFAULT_DEST_SUBDIR == 'to_delete'
    assert not mode.is_delete
    assert DispositionPlanner().mode == mode


@pytest.mark.parametrize('name', ['', '.', '..', 'a/b', 'a\\b', ' padded '])
def test_invalid_dest_subdir(name):
    """不正な移動先サブディレクトリ名は拒否される"""
    with pytest.raises(InvalidConfigError):
        DispositionMode.move(name)


def test_planner_class():
    """DispositionPlannerは保持した処理方法で計画を作成する"""
    classifier = FilenameClassifier(ExtensionConfig(subject_class=FileClass.RAW))
    orphans = [classifier.create_entry('/photos/DSCF5359.RAF')]

    actions = DispositionPlanner(DispositionMode.move('orphans')).plan(orphans)

    assert actions[0].destination == Path('/photos/orphans/DSCF5359.RAF')
    assert os.sep not in actions[0].destination.parent.name
