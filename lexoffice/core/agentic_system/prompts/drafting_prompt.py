"""
Legal drafting system prompt.

Layers: identity and guardrails, writing method, document-type instructions,
then the linked case, project and library references, and finally the
user's tone/length/addressee settings.

Dependencies: langchain_core.prompts
System role: Prompt assembly for AI document drafting
"""

from dataclasses import dataclass, field

from langchain_core.prompts import ChatPromptTemplate

from lexoffice.core.enums import DraftLength, DraftTone

SYSTEM_PROMPT = """You are a senior Brazilian litigation and insolvency lawyer drafting documents for a law firm.

## Rules
1. Write in formal Brazilian Portuguese suitable for filing or sending as-is
2. Never invent case numbers, parties, values or precedents; use placeholders like [TO CONFIRM] when data is missing
3. Cite statutes precisely (law, article, paragraph)
4. Only cite case law present in the firm's knowledge base below, or mark it [VERIFY]
5. Keep the document self-contained: heading, body, requests and closing"""

WRITING_METHOD = """## Writing method
- Open with a one-paragraph synthesis of the request
- State the facts chronologically, then the legal grounds, then the requests
- One argument per section, each with its own heading
- Close every argument with its practical consequence for the client"""

DOCUMENT_INSTRUCTIONS: dict[str, str] = {
    "INITIAL_PETITION": "Include court addressing, full party qualification, facts, law, injunction request if applicable, requests, claim value and evidence.",
    "DEFENSE": "Raise procedural objections first, then contest each fact specifically; avoid generic denials.",
    "APPEAL": "Demonstrate admissibility, summarize the judgment, then attack each ground of the decision.",
    "INTERLOCUTORY_APPEAL": "Show urgency and the risk of irreparable harm; request suspensive effect when applicable.",
    "CLAIM_FILING": "Identify the creditor, the claim origin, its class under Lei 11.101 art. 41 and the updated value.",
    "CLAIM_CHALLENGE": "Point out the divergence in value or class and attach the supporting calculation.",
    "RESTRUCTURING_PLAN": "Describe the means of recovery (art. 50), the payment terms per class and the economic viability.",
    "PLAN_OBJECTION": "Identify illegal or abusive clauses and the creditor classes harmed by them.",
    "LEGAL_OPINION": "Frame the question, analyse the applicable law and precedents, and conclude with a clear recommendation.",
    "EXTRAJUDICIAL_NOTICE": "State the obligation, the default, the deadline to cure and the consequences of inaction.",
    "FORMAL_EMAIL": "Be brief and cordial; one request per email; end with a clear next step.",
    "SETTLEMENT_PROPOSAL": "Present the amount, installments, guarantees and validity of the proposal.",
}

TONE_GUIDANCE: dict[DraftTone, str] = {
    DraftTone.TECHNICAL: "Technical tone: precise terminology, neutral register.",
    DraftTone.PERSUASIVE: "Persuasive tone: lead with the strongest argument, emphasise consequences.",
    DraftTone.CONCILIATORY: "Conciliatory tone: seek convergence, offer alternatives, cooperative language.",
    DraftTone.ASSERTIVE: "Assertive tone: firm language, highlight serious defects and urgency, always formally respectful.",
}

LENGTH_GUIDANCE: dict[DraftLength, str] = {
    DraftLength.CONCISE: "Concise (1-3 pages): essential arguments only.",
    DraftLength.STANDARD: "Standard length (4-10 pages).",
    DraftLength.DETAILED: "Detailed (15+ pages): maximum depth, doctrine and all relevant positions.",
}

LIBRARY_CONTENT_LIMIT = 1500


@dataclass
class CaseContext:
    case_number: str
    case_type: str
    status: str
    court: str | None = None
    district: str | None = None
    state: str | None = None
    claim_value: int | None = None
    client_name: str | None = None
    client_tax_id: str | None = None
    judge_name: str | None = None
    creditors: list[tuple[str, str, int | None]] = field(default_factory=list)


@dataclass
class ProjectContext:
    code: str
    title: str
    category: str
    status: str
    description: str | None = None
    client_name: str | None = None


@dataclass
class LibraryContext:
    title: str
    entry_type: str
    area: str | None = None
    summary: str | None = None
    content: str | None = None
    source: str | None = None


@dataclass
class DraftingContext:
    document_type: str
    tone: DraftTone = DraftTone.TECHNICAL
    length: DraftLength = DraftLength.STANDARD
    addressee: str = "Judge"
    include_case_law: bool = True
    include_doctrine: bool = False
    include_injunction: bool = False
    case: CaseContext | None = None
    project: ProjectContext | None = None
    library: list[LibraryContext] = field(default_factory=list)


def _brl(centavos: int) -> str:
    return f"R$ {centavos / 100:,.2f}"


def _case_section(case: CaseContext) -> str:
    lines = ["## LINKED CASE", f"- Number: {case.case_number}", f"- Type: {case.case_type}", f"- Status: {case.status}"]
    if case.court:
        lines.append(f"- Court: {case.court}")
    if case.district:
        lines.append(f"- District: {case.district}")
    if case.state:
        lines.append(f"- State: {case.state}")
    if case.claim_value:
        lines.append(f"- Claim value: {_brl(case.claim_value)}")
    if case.client_name:
        client = case.client_name
        if case.client_tax_id:
            client += f" ({case.client_tax_id})"
        lines.append(f"- Client: {client}")
    if case.judge_name:
        lines.append(f"- Judge: {case.judge_name}")
    if case.creditors:
        lines.append("\n### Creditors")
        for name, creditor_class, value in case.creditors:
            suffix = f" - {_brl(value)}" if value else ""
            lines.append(f"- {name} ({creditor_class}){suffix}")
    return "\n".join(lines)


def _project_section(project: ProjectContext) -> str:
    lines = [
        "## LINKED PROJECT",
        f"- Code: {project.code}",
        f"- Title: {project.title}",
        f"- Category: {project.category}",
        f"- Status: {project.status}",
    ]
    if project.description:
        lines.append(f"- Description: {project.description}")
    if project.client_name:
        lines.append(f"- Client: {project.client_name}")
    return "\n".join(lines)


def _library_section(entries: list[LibraryContext]) -> str:
    parts = ["## FIRM KNOWLEDGE BASE", "Curated references to consider:\n"]
    for index, entry in enumerate(entries, start=1):
        area = f", {entry.area}" if entry.area else ""
        parts.append(f"[{index}] {entry.title} ({entry.entry_type}{area})")
        if entry.summary:
            parts.append(f"Summary: {entry.summary}")
        if entry.content:
            parts.append(f"Content: {entry.content[:LIBRARY_CONTENT_LIMIT]}")
        if entry.source:
            parts.append(f"Source: {entry.source}")
        parts.append("")
    return "\n".join(parts)


def _settings_section(context: DraftingContext) -> str:
    yes_no = {True: "Yes", False: "No"}
    lines = [
        "## SETTINGS",
        f"- Tone: {context.tone.value}",
        f"- Length: {context.length.value}",
        f"- Addressee: {context.addressee}",
        f"- Case law: {yes_no[context.include_case_law]}",
        f"- Doctrine: {yes_no[context.include_doctrine]}",
        f"- Injunction request: {yes_no[context.include_injunction]}",
        "",
        TONE_GUIDANCE[context.tone],
        LENGTH_GUIDANCE[context.length],
    ]
    return "\n".join(lines)


def build_document_prompt(context: DraftingContext) -> str:
    """
    Assemble the full system prompt for a drafting request.

    Args:
        context: Document type, style flags and linked records

    Returns:
        str: System prompt sections joined by horizontal rules
    """
    parts = [SYSTEM_PROMPT, WRITING_METHOD]

    instructions = DOCUMENT_INSTRUCTIONS.get(context.document_type)
    if instructions:
        parts.append(f"## SPECIFIC INSTRUCTIONS: {context.document_type}\n\n{instructions}")
    if context.case:
        parts.append(_case_section(context.case))
    if context.project:
        parts.append(_project_section(context.project))
    if context.library:
        parts.append(_library_section(context.library))

    parts.append(_settings_section(context))
    return "\n\n---\n\n".join(parts)


def build_user_message(document_type: str, instructions: str | None = None) -> str:
    """Human turn that triggers generation."""
    if instructions:
        return f"Draft a document of type {document_type}. Additional instructions: {instructions}"
    return f"Draft a document of type {document_type} based on the context provided."


DRAFTING_PROMPT = ChatPromptTemplate.from_messages([
    ("system", "{system_prompt}"),
    ("human", "{user_message}"),
])
