"""Digital price book: log grocery purchases and track rock bottom prices."""

__version__ = "0.1.0"


# The CLI pulls in click and the stores, so it is only loaded on first use
def __getattr__(name):
    if name == "main":
        from pricebook.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
