"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus) and task errors
- task_store.py: JSON-file storage + CRUD/status helpers
"""
