"""
Lambda Hubs API — Route Groups
================================

What:  Builders that return an APIRouter for one resource.
How:   Each builder takes the service it needs as an argument; main.py
       decides which prefixes each group is bound to.

Route Inventory:
    - hubs.py:      hubs CRUD + /{id}/messages        (bound to /api/hubs, /repos, /thing/otherthing)
    - messages.py:  GET /{id}                          (bound to /api/messages)
    - adopters.py:  adopters CRUD + /{id}/dogs         (bound to /api/adopters, /i/love/dogs)
    - dogs.py:      GET /{id}                          (bound to /api/dogs)
    - root.py:      GET /  welcome page
    - health.py:    GET /health

Handlers stay thin: call one service method, then turn the result into a
status code. `errors.collaborator_failure` gives each call its 500 message.
"""
