"""Service categories offered on the marketplace."""
from typing import Dict

SERVICE_TYPE_LABELS: Dict[str, str] = {
    "acquisitions": "Acquisitions",
    "appliance_repair": "Appliance Repair",
    "architect_design": "Architect / Design",
    "bookkeeping_accounting": "Bookkeeping / Accounting",
    "cleaning": "Cleaning",
    "cleanout_junk_removal": "Clean Out / Junk Removal",
    "compliance_legal": "Compliance & Legal",
    "electrician": "Electrician",
    "environmental_testing": "Environmental Testing",
    "exterior": "Exterior",
    "financing": "Financing",
    "fire_safety_compliance": "Fire & Safety Compliance",
    "flooring": "Flooring",
    "general_contractor": "General Contractor",
    "handyman": "Handyman",
    "hvac": "HVAC Specialist",
    "insurance": "Insurance",
    "landscaping_snow": "Landscaping / Snow Removal",
    "lead_testing": "Lead Testing",
    "locksmith_security": "Locksmith / Security",
    "movers": "Movers",
    "painting": "Painting",
    "pest_control": "Pest Control",
    "photography": "Photography",
    "plumber_sewer": "Plumber / Sewer",
    "preventative_maintenance": "Preventative Maintenance",
    "property_check": "Property Check / Site Visit",
    "property_management": "Property Management & Tenant Placement",
    "property_tax_appeals": "Property Tax Appeals",
    "re_agent": "Real Estate Agent",
    "roofer": "Roofer",
    "structural": "Structural",
    "training": "Boost My Knowhow (Education)",
    "waterproofing": "Water Proofing / Moisture Control",
}


def service_label(service_type: str) -> str:
    """Human label for a service category, falling back to the raw key."""
    return SERVICE_TYPE_LABELS.get(service_type, service_type)
