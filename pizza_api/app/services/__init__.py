"""
Service layer abstraction.

The services here are pure: building the catalog, looking a name up in
it and shaping the outcome into a response descriptor.  Adapters for
FastAPI, AWS Lambda and the command line sit on top of them.
"""
