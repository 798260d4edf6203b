"""
Integration clients.

- real_http: talks to a BTCPay Server over HTTP
- mocks: in-memory stand-ins used by tests and local development

Resource clients depend only on the Transport contract, so either kind of
transport can be handed to them.
"""
