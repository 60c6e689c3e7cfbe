# Repositories package init
"""
Social API — Storage Layer
============================

What:  One store per table, each a thin wrapper around parameterized statements.
How:   Stores are stateless; every method receives the request's AsyncSession.
       Driver failures are logged, rolled back, and re-raised as DatabaseError.

Store Inventory:
    - AccountStore: username_exists, insert, get_by_credentials
    - MessageStore: list_all, get_by_id, insert, update_text, delete_by_id,
                    list_by_account
"""
