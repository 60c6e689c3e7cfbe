# Routes package init
"""
Social API — HTTP Routes Package
==================================

Route Inventory:
    - accounts.py:  POST /register, POST /login
    - messages.py:  POST/GET /messages, GET/DELETE/PATCH /messages/{message_id},
                    GET /accounts/{account_id}/messages
    - health.py:    GET /health

Routes are thin: they parse the request, call a service, and choose the
status code for each failure kind. Business rules live in social_api.services.
"""
