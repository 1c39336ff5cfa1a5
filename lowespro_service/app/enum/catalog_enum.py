from enum import Enum


class BrandIndustry(str, Enum):
    roofing = "roofing"
    electrical = "electrical"
    wire_cable = "wire_cable"
    decking = "decking"
    concrete = "concrete"
    plumbing = "plumbing"
    lumber = "lumber"
    hardware = "hardware"
    other = "other"
