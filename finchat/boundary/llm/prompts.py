"""
Prompt templates for fragment filtering and answer synthesis.

Dependencies: langchain_core.prompts
System role: Prompt definitions for the LLM post-processor
"""

from langchain_core.prompts import ChatPromptTemplate

IRRELEVANT_MARKER = "IRRELEVANT"

FILTER_PROMPT = ChatPromptTemplate.from_messages([
    ("human", """Analyze the following financial text fragment and decide whether it is relevant and useful for answering questions about: {topic}

FRAGMENT:
{fragment}

INSTRUCTIONS:
- If the fragment is relevant, improve it by removing redundant or irrelevant information
- If the fragment is not relevant, reply with exactly "{marker}"
- Keep key financial information (figures, dates, company names, tickers)
- Make the text clearer and more concise

RESULT:"""),
])

ANSWER_SYSTEM_PROMPT = (
    "You are a finance expert assistant who gives accurate, useful information "
    "based on current financial data."
)

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", ANSWER_SYSTEM_PROMPT),
    ("human", """Using the relevant financial information below, answer the user's question clearly and precisely.

RELEVANT FINANCIAL INFORMATION:
{context}

USER QUESTION:
{question}

INSTRUCTIONS:
- Answer only from the information provided
- If the information is not enough to answer fully, say so clearly
- Give a structured answer that is easy to follow
- Include specific figures when relevant
- Keep a professional but accessible tone
- Answer in the language of the question

ANSWER:"""),
])
