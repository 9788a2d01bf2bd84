"""PingFederate connector package.

To build a connector:
    from baton_pingfederate.connector import PingFederateConnector
    from baton_pingfederate.config import load_settings

    connector = PingFederateConnector(load_settings())

To use the Admin API client alone:
    from baton_pingfederate.core.pingfederate import PingFederateClient, RoleService
"""
__version__ = "0.1.0"
