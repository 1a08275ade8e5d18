from .task import Task, TITLE_MAX_LENGTH

# Export all models for easy importing
__all__ = ["Task", "TITLE_MAX_LENGTH"]
