"""Interfaces (application boundary) for isogrid.

Defines framework-free application contracts shared by the service layer and
adapters, such as the provider of default grid settings. Business rules stay
out of this package.

Dependency rule: may import `isogrid.domain` only. It may be imported by
`isogrid.service_layer`, `isogrid.adapters`, and `isogrid.bootstrap`.
"""
