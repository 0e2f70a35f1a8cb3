"""
This __init__.py file is kept in the root tests directory while other __init__.py files
in the test structure are left out.

Keeping it makes pytest treat tests/ as a package, so helper modules import as
`tests.helpers...` consistently across environments. Sub-directories work as
namespace packages (PEP 420) without their own __init__.py.
"""
