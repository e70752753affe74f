"""
Service layer abstraction.

``StudentStore`` owns the in-memory records; ``SummaryService`` talks
to the external text-generation service.  Route handlers only parse
requests and delegate here.
"""
