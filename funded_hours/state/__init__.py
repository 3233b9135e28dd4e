"""
Roster state module.

Pure transitions over the caller-owned roster of children: adding,
removing, recording attendance and switching funding options.
"""
