"""Company records package.

Employees and departments persisted in one flat text file. Organized by
feature modules (employees, departments) over a shared storage layer, with a
thin terminal menu on top of the service/repository layers.
"""
