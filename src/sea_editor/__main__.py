from sea_editor.cli import run

if __name__ == "__main__":  # pragma: no cover - manual entry point
    run()
