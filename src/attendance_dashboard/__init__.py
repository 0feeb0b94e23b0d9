"""Employee attendance dashboard.

Feature modules (auth, employees, attendance) keep a thin Flask controller
layer over view-model/service and repository layers. Persistence, auth and
queries are delegated to the managed backend (Supabase).
"""
