from file_navigator.cli_browser import main

if __name__ == "__main__":
    raise SystemExit(main())
