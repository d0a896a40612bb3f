"""
Backend module — доступ к данным и аутентификация Supabase.
"""

from blogify.infrastructure.backend.data_access import IDataAccessClient, Ordering, Row
from blogify.infrastructure.backend.factory import open_data_client
from blogify.infrastructure.backend.supabase_auth import SupabaseAuthClient
from blogify.infrastructure.backend.supabase_rest import SupabaseRestClient

__all__ = [
    'IDataAccessClient',
    'Ordering',
    'Row',
    'open_data_client',
    'SupabaseAuthClient',
    'SupabaseRestClient',
]
