"""Small utilities: line feeds, file splitting, FTP scripts, HTML index pages, long-filename fixing and an HTML template preprocessor."""

__version__ = "1.0.0"