"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, Priority, result enums)
- task_store.py: flat-file (CSV) load/save
- overdue.py: derives the Overdue status from due date and today
- task_ops.py: add/complete/delete over an in-memory TaskCollection
- task_views.py: display ordering and filters
- task_api.py: TaskService, the facade used by the console shell
"""
