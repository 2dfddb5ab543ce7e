"""
High-level use cases for the data entry form.

The controller orchestrates the form state and the people repository; routers
call it instead of touching the store directly.
"""
