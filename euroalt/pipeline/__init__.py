from .orchestrator import CatalogueBrowser

__all__ = ["CatalogueBrowser"]
