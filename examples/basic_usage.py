#!/usr/bin/env python3
"""
photo_tools - 基本的な使用例

このスクリプトは、photo_toolsの基本的な使用方法を示します。
プログラムから直接ツールの機能を呼び出す例を提供します。
"""

from pathlib import Path

from photo_tools import (
    CleanupManager, DispositionMode, ExtensionConfig, FileScanner,
    ValidationError, find_orphans, plan
)


def example_dry_run(photo_directory: Path):
    """ファイルに触れずに孤立ファイルと処理計画を確認する例"""
    print("=" * 60)
    print("ステップ1: 孤立ファイルの確認（ファイルは変更しません）")
    print("=" * 60)

    # 対応するRAFがないJPGを探す
    config = ExtensionConfig.from_mode('IMG', raw_ext='RAF', developed_ext='JPG')

    entries = FileScanner(config).scan_directory(photo_directory)
    orphans = find_orphans(entries, config)

    print(f"ファイル数: {len(entries)}")
    print(f"孤立ファイル数: {len(orphans)}")

    for action in plan(orphans, DispositionMode.move()):
        print(f"  {action.source.name} -> {action.destination}")
    print()


def example_cleanup(photo_directory: Path):
    """対応するJPGがないRAFファイルを to_delete へ移動する例"""
    print("=" * 60)
    print("ステップ2: 孤立したRAWファイルの移動")
    print("=" * 60)

    config = ExtensionConfig.from_mode('RAW')
    stats = CleanupManager().clean_orphans(
        directory=photo_directory,
        config=config,
        mode=DispositionMode.move('to_delete'),
        dry_run=True,  # 実際に移動する場合はFalse
        verbose=False
    )

    print(f"孤立ファイル: {stats.orphans_found}個")


def main():
    """メイン関数"""
    # 例用のディレクトリパス（実際の使用時は適切なパスに変更してください）
    photo_directory = Path("~/Pictures/session").expanduser()

    if not photo_directory.exists():
        print(f"⚠️  ディレクトリが存在しません: {photo_directory}")
        print("実際のディレクトリパスに変更してください。")
        return

    try:
        example_dry_run(photo_directory)
        example_cleanup(photo_directory)
        print("✅ 処理が完了しました！")
    except ValidationError as e:
        print(f"❌ 入力エラー: {e}")


if __name__ == "__main__":
    main()
