"""
Service layer.

``name_loader`` reads the name list, ``alphabet_index`` groups it by
first letter and ``user_service`` answers queries over both.  None of
these modules know about HTTP.
"""
