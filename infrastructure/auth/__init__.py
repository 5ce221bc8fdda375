from infrastructure.auth.supabase_auth import SupabaseAuthProvider

__all__ = ["SupabaseAuthProvider"]
