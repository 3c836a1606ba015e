"""
Campus Data Backend — API Routes Package
=========================================

What:  HTTP route handlers (resource controllers) for the campus data API.
How:   One module per resource. Every resource exposes the same five
       operations through the shared CrudService:

           GET    {prefix}/all        list
           GET    {prefix}?<key>=     get one
           POST   {prefix}/post?...   create from query parameters
           PUT    {prefix}?<key>=     full replace from a JSON body
           DELETE {prefix}?<key>=     delete

Route Inventory:
    - ucsb_dates.py               /api/ucsbdates (+ /quarter finder)
    - dining_commons.py           /api/ucsbdiningcommons   (key: code)
    - dining_commons_menu.py      /api/ucsbdiningcommonsmenu
    - menu_item_reviews.py        /api/menuitemreview
    - recommendation_requests.py  /api/recommendationrequest
    - organizations.py            /api/ucsborganization    (key: orgCode)
    - help_requests.py            /api/helprequest
    - articles.py                 /api/articles
    - user_info.py                GET /api/currentUser
    - users.py                    GET /api/admin/users
    - system_info.py              GET /api/systemInfo
    - health.py                   GET /health

Routes stay thin: capability check, service call, schema conversion.
"""
