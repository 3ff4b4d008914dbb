"""
Student service: owner-scoped student records
"""
