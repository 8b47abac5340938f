"""
Task subsystem.

Components:
- task_models.py: ToDo / Deadline / Event records and their date formats
- task_list.py: ordered, index-addressed in-memory collection
- task_store.py: flat-file storage (load, full rewrite, single-line append)
"""
