class UniqueConstraintError(Exception):
    """Write rejected because another row already holds a unique value"""
