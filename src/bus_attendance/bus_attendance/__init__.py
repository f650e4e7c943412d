"""Bus attendance package.

Organized by feature modules (users, attendance, reports, qr) with a thin
Flask controller layer over service/repository layers.
"""
