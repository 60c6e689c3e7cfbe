# Services package init
"""
Social API — Services Layer
=============================

What:  Business rules sitting between routes (HTTP) and repositories (SQL).
How:   Services validate input, call the stores, and return response schemas.
       Failures are raised as exceptions from social_api.exceptions.

Service Inventory:
    - AccountService: register, login
    - MessageService: create, get_all, get_by_id, delete_by_id, update_text,
                      get_by_account
"""
