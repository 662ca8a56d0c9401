"""
Domain services: uniqueness pre-checks, partial-update merging, referential
error refinement and report orchestration. One service per entity, each built
on a repository so tests can swap in fakes.
"""
