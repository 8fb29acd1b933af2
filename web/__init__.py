"""
web - Flask JSON API.
"""
