"""Core PingFederate logic.

Module Structure:
    - pingfederate/          : Admin API client, account and role services
    - types.py               : Resource/entitlement/grant objects exchanged with the sync host
    - resource_types.py      : The ``user`` and ``role`` resource types
    - resource_transformer.py : PingFederate → host resource conversions

Import explicitly when needed:
    from baton_pingfederate.core.pingfederate import PingFederateClient, RoleService
    from baton_pingfederate.core.resource_transformer import ResourceTransformer
"""
