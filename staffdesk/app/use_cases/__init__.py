"""
Staffdesk Use Cases

Business logic organized by domain.
"""
