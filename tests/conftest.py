import os

# Subprocess coverage for the CLI entry point tests
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()
