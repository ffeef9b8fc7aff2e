# Custom exceptions for docgraph

class DocgraphError(Exception):
    """Base exception for all application-specific errors."""
    pass

class ProjectLoadError(DocgraphError):
    """Raised when a project description cannot be loaded."""
    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"Failed to load project from {source}: {message}")

class PluginRegistrationError(DocgraphError):
    """Raised when a converter plugin name is registered twice."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A converter plugin named '{name}' is already registered.")

class ConfigError(DocgraphError):
    """Raised for configuration-related problems."""
    pass
