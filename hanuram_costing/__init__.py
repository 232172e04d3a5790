"""Recipe and overhead costing for Hanuram Foods.

Pure cost computations over data already loaded from the business API:
- Unit conversion between units of measure
- Raw material, labour, and packaging costs per recipe
- Monthly operational cost allocation per kg produced
- Landed cost breakdown per output unit
"""

__version__ = "1.0.0"
