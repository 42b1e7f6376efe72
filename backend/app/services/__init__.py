"""
Services Layer

Tournament rules, kept apart from HTTP and SQL:
- bracket_validator / bracket_builder: check and materialize a round chain
- status_machine: which mutations a tournament's status permits
- qualifying_ranker: competition ranking of best qualifying times
- tournament_service: the operations the routes call, wired to repositories
"""
