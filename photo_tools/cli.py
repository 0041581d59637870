"""
コマンドラインインターフェース

photo_toolsのメインエントリーポイントです。
フォルダ内の孤立ファイル（対になるRAWまたは現像済み画像がないファイル）を検出し、
サブフォルダへ移動、または削除します。
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .cleanup_manager import CleanupManager
from .exceptions import ProcessingError, ValidationError
from .models import DEFAULT_DEVELOPED_EXT, DEFAULT_RAW_EXT, ExtensionConfig
from .path_validator import PathValidator
from .planner import DEFAULT_DEST_SUBDIR, DispositionMode


def create_parser() -> argparse.ArgumentParser:
    """
    コマンドライン引数パーサーを作成

    Returns:
        設定済みのArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='photo-tools',
        description='写真管理ツール: フォルダ内の孤立ファイルを検出して移動または削除します。',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用例:
  # 対応するRAFがないJPGファイルを to_delete フォルダへ移動
  photo-tools IMG --path /path/to/photos

  # 対応するJPGがないRAFファイルを削除
  photo-tools RAW --path /path/to/photos --delete

  # 拡張子を指定（Sony ARW + JPG）
  photo-tools RAW -r ARW -j JPG -p /path/to/photos

  # 実行せずに対象ファイルを確認
  photo-tools IMG -p /path/to/photos --dry-run
        """
    )

    parser.add_argument(
        'filter',
        metavar='FILTER',
        type=str,
        help='IMG（現像済み画像を検査）または RAW（RAWファイルを検査）'
    )
    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'%(prog)s {__version__}',
        help='バージョンを表示'
    )
    parser.add_argument(
        '--rawext', '-r',
        type=str,
        default=DEFAULT_RAW_EXT,
        help=f'RAWファイルの拡張子（デフォルト: {DEFAULT_RAW_EXT}）'
    )
    parser.add_argument(
        '--photoext', '-j',
        type=str,
        default=DEFAULT_DEVELOPED_EXT,
        help=f'現像済み画像の拡張子（デフォルト: {DEFAULT_DEVELOPED_EXT}）'
    )
    parser.add_argument(
        '--path', '-p',
        type=str,
        default='',
        help='写真フォルダのパス（省略時はカレントディレクトリ）'
    )
    parser.add_argument(
        '--delete', '-d',
        action='store_true',
        help='孤立ファイルを移動せずに削除する'
    )
    parser.add_argument(
        '--dest-dir', '-o',
        type=str,
        default=DEFAULT_DEST_SUBDIR,
        help=f'孤立ファイルの移動先サブフォルダ名（デフォルト: {DEFAULT_DEST_SUBDIR}）'
    )
    parser.add_argument(
        '--dry-run', '-n',
        action='store_true',
        help='ファイルを変更せず、処理予定のみ表示'
    )
    parser.add_argument(
        '--ignore-case', '-i',
        action='store_true',
        help='ファイル名（ベースID）の大文字小文字を区別しない'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='詳細ログを表示'
    )

    return parser


def handle_clean_command(args) -> int:
    """
    整理処理を実行

    Args:
        args: 解析されたコマンドライン引数

    Returns:
        終了コード（0: 成功、1: エラーまたは失敗したアクションあり）
    """
    try:
        config = ExtensionConfig.from_mode(
            args.filter,
            raw_ext=args.rawext,
            developed_ext=args.photoext,
            ignore_case=args.ignore_case
        )
        mode = DispositionMode.delete() if args.delete else DispositionMode.move(args.dest_dir)
        directory = PathValidator.normalize_path(args.path)

        manager = CleanupManager()
        stats = manager.clean_orphans(
            directory=directory,
            config=config,
            mode=mode,
            dry_run=args.dry_run,
            verbose=args.verbose
        )

        if stats.actions_failed:
            print(f"❌ {stats.actions_failed}件のファイルを処理できませんでした", file=sys.stderr)
            return 1

        return 0

    except ValidationError as e:
        print(f"❌ 入力エラー: {e}", file=sys.stderr)
        return 1
    except ProcessingError as e:
        print(f"❌ 処理エラー: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"❌ 予期しないエラー: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    メインエントリーポイント

    Args:
        argv: コマンドライン引数（省略時は sys.argv[1:]）

    Returns:
        終了コード（0: 成功、1: エラー）
    """
    parser = create_parser()

    if argv is None:
        argv = sys.argv[1:]

    # 引数が指定されていない場合はヘルプを表示
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)
    return handle_clean_command(args)


if __name__ == '__main__':
    sys.exit(main())
