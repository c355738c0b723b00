from datetime import datetime, timedelta
from typing import List

from leaddesk.models.lead import Lead, Stage

# (id, name, contact, propertyType, budget, stage, days since contact,
#  nextAction, daysInStage, conversionProbability, notes)
_DEMO = [
    ("1", "Carlos Silva", "(11) 98765-4321", "3-bedroom apartment", "R$ 800k",
     Stage.FIRST_CONTACT, 0, "Call back today at 3pm", 0, 75,
     "Very interested, asked for more photos"),
    ("2", "Maria Santos", "(11) 97654-3210", "Gated community house", "R$ 1200k",
     Stage.INTEREST, 1, "Confirm visit tomorrow at 2pm", 3, 85,
     "Wants to see 3 options on the same day"),
    ("3", "Joao Oliveira", "(11) 96543-2109", "2-bedroom apartment", "R$ 600k",
     Stage.NEGOTIATION, 5, "URGENT: no contact for 5 days", 8, 45,
     "Comparing with another property"),
    ("4", "Ana Paula Costa", "(11) 95432-1098", "Penthouse", "R$ 1500k",
     Stage.CLOSING, 1, "Send contract for signature", 2, 90,
     "Credit approval confirmed"),
    ("5", "Roberto Mendes", "(11) 94321-0987", "4-bedroom apartment", "R$ 950k",
     Stage.INTEREST, 12, "ATTENTION: reactivate lead", 12, 20,
     "Did not answer the last 3 messages"),
    ("6", "Patricia Lima", "(11) 93210-9876", "3-bedroom apartment", "R$ 750k",
     Stage.NEGOTIATION, 0, "Answer counteroffer", 5, 70,
     "Offered R$ 720k"),
    ("7", "Fernando Costa", "(11) 92109-8765", "Studio", "R$ 400k",
     Stage.FIRST_CONTACT, 2, "Send property options", 2, 55,
     "Interested in property options"),
    ("8", "Juliana Alves", "(11) 91098-7654", "Single-storey house", "R$ 900k",
     Stage.INTEREST, 0, "Prepare paperwork", 1, 80,
     "Loved the last visit"),
]


def demo_leads(now: datetime) -> List[Lead]:
    """Eight sample leads with contact times relative to `now`."""
    return [
        Lead(
            id=lid,
            name=name,
            contact=contact,
            propertyType=ptype,
            budget=budget,
            stage=stage,
            lastInteractionAt=now - timedelta(days=ago),
            nextAction=next_action,
            daysInStage=in_stage,
            conversionProbability=prob,
            notes=notes,
        )
        for (lid, name, contact, ptype, budget, stage, ago,
             next_action, in_stage, prob, notes) in _DEMO
    ]
