"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskField, TaskChange)
- task_parsing.py: text -> field value parsers shared by store and console
- task_store.py: lock-protected in-memory store with change notification
- overdue_monitor.py: polling monitor that reports overdue tasks
"""
