"""
FastAPI routers for the data entry page.

Routers translate form posts into controller actions and keep the page state
(listing text, pending notification) on app.state.
"""
