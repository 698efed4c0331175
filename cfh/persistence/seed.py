"""Starter content every fresh store begins with."""

STARTER_RESOURCES: list[dict[str, str]] = [
    {
        "title": "Bulletproof Contract Template",
        "category": "contracts",
        "markdown": (
            "# Bulletproof Contract Template\n\n"
            "This contract is designed to protect freelancers from scope creep, "
            "payment issues, and intellectual property disputes."
        ),
        "download_url": "/downloads/bulletproof-contract.pdf",
    },
    {
        "title": "Real Price Calculator",
        "category": "pricing",
        "markdown": (
            "# Real Price Calculator\n\n"
            "Calculate what you should actually charge based on your experience, "
            "market rates, and client difficulty."
        ),
        "download_url": "/downloads/price-calculator.xlsx",
    },
    {
        "title": "Email Response Templates",
        "category": "communication",
        "markdown": (
            "# Email Response Templates\n\n"
            "Professional templates for handling difficult clients, late payments, "
            "and scope creep."
        ),
        "download_url": "/downloads/email-templates.docx",
    },
]
