# Demo texts, each tripping a different mix of rules.
SAMPLES = [
    {
        "label": "Email (Hydraulics, DE)",
        "businessUnit": "hydraulics",
        "country": "DE",
        "assetType": "email",
        "contentType": "internal",
        "content": (
            "We present a world-class climate neutral motor upgrade as a green solution with zero "
            "emissions for your plant. Around 10 kW per pump is expected. This deck is customer-facing."
        ),
    },
    {
        "label": "Slide notes (Automation, DK)",
        "businessUnit": "automation",
        "country": "DK",
        "assetType": "slide",
        "contentType": "internal",
        "content": (
            "Headline: GAME-CHANGING IIoT GATEWAY. Tiny logo in corner, all caps headline. Copy: super "
            "cheap, eco-friendly upgrade for legacy lines, click here now to learn more."
        ),
    },
    {
        "label": "ESG paragraph (Pumping, IN)",
        "businessUnit": "pumping",
        "country": "IN",
        "assetType": "doc",
        "contentType": "esg-report",
        "content": (
            "Thanks to cheap labour in India we can offer a super cheap upgrade path, positioned as a "
            "green solution without detailed lifecycle data. Figures are subject to change."
        ),
    },
    {
        "label": "Image description (Sensors, US)",
        "businessUnit": "sensors",
        "country": "US",
        "assetType": "image",
        "contentType": "internal",
        "content": (
            "Hero image shows a smokestack and coal plant with heavy pollution, with a tiny logo in the "
            "corner. Caption uses click here now CTA about condition monitoring."
        ),
    },
]
