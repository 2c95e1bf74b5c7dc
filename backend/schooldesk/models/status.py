"""
Statuts partagés par les élèves et le personnel (archivage = suppression logique).
"""

ACTIVE = "Active"
LEFT = "Left"
