"""Stream Heroes: donation tracking for livestreamers."""

__version__ = "0.1.0"


# Resolved on first access so importing the package does not load the CLI
def __getattr__(name):
    if name == "main":
        from streamheroes.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
