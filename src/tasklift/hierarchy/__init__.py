"""
Output model: NamespaceGroup -> ListGroup -> TaskOut.

Handed as a whole to the persistence collaborator (see core.ports.HierarchySink).
"""
