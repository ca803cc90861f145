"""requirecodeownersのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    from requirecodeowners.cli import main

    main()
