SAMPLE_HEADERS = [
    "Client Name", "Short Name", "Domain", "Industry", "Company Size", "Status", "Source",
    "Address", "Website", "Contact Name", "Contact Email", "Contact Phone", "Contact Title",
    "Contract Name", "Contract Start Date", "Contract End Date", "Contract Value",
    "License Pool", "License Quantity", "Hardware Name", "Hardware Category",
    "Hardware Manufacturer", "Hardware Model", "Hardware Serial", "Hardware Cost",
    "Hardware Location",
]

SAMPLE_ROWS = [
    [
        "Customer Apps", "Customer Apps", "C003", "Technology", "Large", "active", "nca",
        "King Fahd Road; Riyadh 12345; Saudi Arabia", "https://customerapps.com",
        "John Smith", "john.smith@customerapps.com", "+966-11-234-5678",
        "Chief Information Security Officer", "Annual SIEM Monitoring Contract 2024",
        "2024-01-01", "2024-12-31", "180000", "SIEM EPS Pool", "5000",
        "Firewall Primary - Customer Apps", "Network Security", "Fortinet", "FortiGate 600E",
        "FG600E-C003-001", "15000", "Primary Data Center",
    ],
    [
        "Saudi Information Technology Company", "SITE", "C004", "Technology", "Large", "active",
        "direct", "King Abdul Aziz Road; Riyadh 11564; Saudi Arabia", "https://site.sa",
        "Ahmed Ali", "ahmed.ali@site.sa", "+966-11-345-6789", "Director of Cybersecurity",
        "Comprehensive IT Security Services 2024", "2024-01-01", "2024-12-31", "250000",
        "SIEM EPS Pool", "10000", "SOC Server - SITE", "Server Hardware", "Dell",
        "PowerEdge R740", "DELL-R740-C004-001", "25000", "SOC Operations Center",
    ],
    [
        "Red Sea Development Company", "Red Sea Dev", "R001", "Real Estate", "Large", "active",
        "both", "Red Sea Project; NEOM 49643; Saudi Arabia", "https://theredsea.sa",
        "Sarah Ahmed", "sarah.ahmed@theredsea.sa", "+966-12-456-7890", "Chief Technology Officer",
        "Smart Infrastructure Security Services 2024", "2024-01-01", "2024-12-31", "320000",
        "SIEM EPS Pool", "7500", "Security Gateway - Red Sea", "Network Security", "Cisco",
        "ASA 5585-X", "CISCO-ASA-R001-001", "35000", "Red Sea Data Center",
    ],
]


def sample_text() -> str:
    """Tab-separated paste covering every entity type, as copied from a spreadsheet."""
    lines = ["\t".join(SAMPLE_HEADERS)]
    lines.extend("\t".join(row) for row in SAMPLE_ROWS)
    return "\n".join(lines)
