# service/__init__.py
# Configuration, API schemas and the extract pipeline shared by main.py and server.py.
