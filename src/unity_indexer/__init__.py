"""unity-indexer - searchable function index for Unity C# projects."""

__version__ = "0.1.0"
