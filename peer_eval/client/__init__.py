"""Python clients for the admin and peer sides of the HTTP API"""
