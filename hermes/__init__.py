# hermes/__init__.py
