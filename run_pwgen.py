import sys


def main() -> None:
    # `run_pwgen.py cli [options]` for the terminal, the Qt window otherwise.
    if len(sys.argv) > 1 and sys.argv[1] == "cli":
        from pwgen.cli import main as cli_main

        sys.exit(cli_main(sys.argv[2:]))

    from pwgen.gui_qt import main as gui_main

    gui_main()


if __name__ == "__main__":
    main()
