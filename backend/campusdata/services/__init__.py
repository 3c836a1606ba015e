"""
Campus Data Backend — Services Package
=======================================

    crud_service.py          list/get/create/update/delete shared by resources
    current_user_service.py  resolve-or-create users, compute roles
    system_info_service.py   public service facts for the frontend
"""
