# Database module
from .connection import Database, get_database, get_session
from .schema import initialize_schema
