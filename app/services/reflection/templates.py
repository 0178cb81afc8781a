"""
Fallback reply templates.

Each support type owns an ordered list of buckets. A bucket is keyed by the
TextAnalysis flag that selects it; the first bucket whose flag is set wins,
and the trailing bucket (flag None) catches everything else.
"""

from typing import Dict, List, Optional, Tuple

from app.services.reflection.types import SupportType


TemplateBucket = Tuple[Optional[str], Tuple[str, ...]]

GREETING = "is_greeting"
QUESTION = "is_question"
EMOTION = "contains_emotion_word"
GOALS = "mentions_goals"
PHILOSOPHICAL = "mentions_philosophical_terms"
GENERIC = None


GENERAL_TEMPLATES: List[TemplateBucket] = [
    (GREETING, (
        "Hello there! It's nice to connect with you today. How can I be of help or support right now?",
        "Hi! I'm here as your conversational companion. What's on your mind today that you'd like to chat about?",
        "Greetings! I'm here to listen, reflect, and engage with whatever topics interest you today. How are you doing?",
        "Hello! I'm ready to chat about whatever matters to you today. What would you like to discuss or explore together?",
    )),
    (QUESTION, (
        "That's a thoughtful question. I'd love to explore this together. What perspectives have you already considered on this topic?",
        "Interesting question! While I don't have all the answers, I'm happy to think through this with you. What aspects of this question feel most important to understand?",
        "You've asked something worth reflecting on. Sometimes the best insights come through dialogue rather than immediate answers. What led you to wonder about this?",
        "Great question. Sometimes the process of exploring questions is as valuable as the answers themselves. What initial thoughts do you have on this matter?",
    )),
    (EMOTION, (
        "I appreciate you sharing how you're feeling. Our emotions often provide important signals about what matters to us. Would you like to explore what might be behind these feelings?",
        "Thank you for expressing your emotions so openly. Feelings can be valuable guides when we take time to listen to them. Has anything in particular triggered these emotions?",
        "I notice you're sharing some emotional experiences. That kind of awareness is really valuable. How long have you been feeling this way?",
        "Thank you for trusting me with your feelings. Emotional awareness is a strength, not a weakness. What do these feelings tell you about what's important to you right now?",
    )),
    (GOALS, (
        "It sounds like you're focused on your goals, which is wonderful! Clarity about what we want helps direct our energy effectively. What makes this goal particularly meaningful to you?",
        "Goals provide such valuable direction in life. What first step might build some momentum toward what you're hoping to achieve?",
        "Having clear intentions is so powerful for making progress. What support or resources might help you move forward with this goal?",
        "I'm glad you're thinking about your goals. Often the 'why' behind a goal is just as important as the goal itself. What deeper values or needs does this goal connect with for you?",
    )),
    (GENERIC, (
        "I'm here to chat and provide support about whatever's on your mind. What matters most to you right now that you'd like to discuss?",
        "Thank you for sharing that with me. I'm curious to hear more about your thoughts or experiences with this. What aspects would be most helpful to explore further?",
        "I appreciate you opening up this conversation. Sometimes just articulating our thoughts can bring greater clarity. Is there a particular perspective or idea that feels most important to you right now?",
        "I'm here as a thoughtful conversation partner. Sometimes the best insights come when we explore ideas together rather than alone. What else comes to mind as you consider this topic?",
    )),
]

EMOTIONAL_TEMPLATES: List[TemplateBucket] = [
    (GREETING, (
        "Hello there! I'm here as your emotional support companion. How are you really feeling today? Remember that it's okay to be honest about your emotions.",
        "Hi! I'm here to provide a supportive space for you. How are you feeling today? Sometimes just naming our emotions can help us understand them better.",
        "Welcome to our conversation. I'm here to listen and support you with whatever you're feeling. What emotions have been present for you today?",
        "Hello! I'm here as a compassionate presence. How are you feeling right now? Taking a moment to check in with ourselves can be a powerful practice.",
    )),
    (QUESTION, (
        "That's a thoughtful question about emotions. Our feelings often arise from a complex mix of thoughts, physical sensations, and circumstances. What led you to wonder about this?",
        "You're asking something important here. Exploring emotional questions together can lead to valuable insights. Could you share more about how this connects to your own experience?",
        "Questions about our emotional lives often reveal what matters most to us. I'm curious about what prompted this question for you today?",
        "That's a meaningful question. Sometimes the process of exploring emotional questions is just as valuable as finding answers. What aspects of this question feel most significant to you right now?",
    )),
    (EMOTION, (
        "Thank you for sharing how you're feeling. It takes courage to express emotions openly. All feelings are valid information, even the difficult ones. Would it help to explore what might be beneath these emotions?",
        "I appreciate your openness about your feelings. Emotions are like messengers, telling us something important about our needs and values. What do you think these feelings might be trying to tell you?",
        "Sharing your emotions is a sign of strength, not weakness. When we acknowledge our feelings without judgment, we create space for understanding and healing. Is there something specific that triggered these emotions?",
        "Thank you for trusting me with your feelings. Sometimes emotions that seem overwhelming become more manageable when we express them. How long have you been experiencing these feelings?",
    )),
    (GENERIC, (
        "I'm here to support you emotionally. Sometimes just expressing our thoughts can help us process our feelings. Is there something specific on your mind today that you'd like to explore?",
        "I notice you're sharing some thoughts with me. Sometimes our thoughts and emotions are deeply connected. How are you feeling as you share this with me?",
        "Thank you for reaching out. A supportive conversation can help us navigate our emotional landscape. What feelings have been most present for you recently?",
        "I'm here as a compassionate presence in your day. You don't have to face difficult emotions alone. What has been challenging for you lately?",
    )),
]

PRODUCTIVITY_TEMPLATES: List[TemplateBucket] = [
    (GREETING, (
        "Hello! I'm your productivity coach and partner in achieving your goals. What are you working on today that I can help you approach more effectively?",
        "Welcome! I'm here to help you work smarter, not just harder. What's on your priority list today that you'd like to make progress on?",
        "Hi there! I'm your productivity ally. The most effective people start with clarity about their intentions. What would make today a success for you?",
        "Greetings! I'm your productivity coach. Remember that productivity isn't about doing more things, it's about doing the right things. What matters most to you right now?",
    )),
    (QUESTION, (
        "That's an excellent question about productivity. Sustainable productivity comes from aligning our work with our natural energy cycles and strengths, rather than forcing ourselves to follow rigid systems. What have you noticed works best for your own rhythm?",
        "Great question! Deep, focused work without distractions tends to lead to the most meaningful results. Have you experimented with blocking dedicated focus time for your most important tasks?",
        "You've raised an important productivity question. Many people find time-blocking effective: scheduling specific hours for different types of tasks based on when their energy peaks. How do you currently structure your work time?",
        "Thoughtful question! The Eisenhower Matrix helps us distinguish between what's urgent and what's important, which are often two very different things. Which of your tasks would you place in the 'important but not urgent' quadrant?",
    )),
    (GOALS, (
        "Setting clear, achievable goals is a great start! The SMART framework (Specific, Measurable, Achievable, Relevant, Time-bound) provides a powerful structure. Could we refine your goal using these criteria to make progress more visible?",
        "I'm glad you're focusing on your goals. Breaking larger goals into smaller milestones creates more consistent motivation through regular wins. What would be a meaningful first milestone for this larger goal?",
        "Goal setting is powerful when combined with implementation intentions: specific plans for when and how you'll take action. Instead of 'I'll exercise more,' try 'I'll walk for 20 minutes after lunch on Monday, Wednesday, and Friday.' How might you apply this to your current goal?",
        "Your goal focus is excellent! Sharing your goals with someone who will hold you accountable makes follow-through far more likely. Who might serve as an accountability partner for this particular goal?",
    )),
    (GENERIC, (
        "As your productivity coach, I believe effective work comes from managing your energy, not just your time. High performers alternate between focused work and true renewal. How might you build more deliberate breaks into your day?",
        "One productivity principle that often gets overlooked is the power of saying no. Every yes to something means saying no to everything else you could do with that time. Which current commitments might you need to reevaluate?",
        "Productivity isn't just about tools and techniques. It's deeply connected to purpose, and when we understand why a task matters, motivation often follows. How does your current work connect to what's most meaningful to you?",
        "The most productive people don't rely on willpower alone. They design their environment to make the right actions easier. What adjustments to your workspace might reduce friction for your most important tasks?",
    )),
]

PHILOSOPHY_TEMPLATES: List[TemplateBucket] = [
    (GREETING, (
        "Greetings, fellow seeker of wisdom. As Socrates approached philosophical inquiry with a recognition of his own ignorance, let us begin our dialogue with both curiosity and humility. What philosophical questions have been occupying your thoughts?",
        "Welcome to our philosophical exchange. As Aristotle noted, philosophy begins in wonder. What aspects of existence have recently sparked your curiosity or contemplation?",
        "I am pleased to engage in this meeting of minds. The Stoics remind us that each moment offers an opportunity for deepened understanding. What wisdom shall we pursue together in this conversation?",
        "Well met on this journey of inquiry. As Hannah Arendt suggested, thinking is a dialogue between me and myself. In sharing our thoughts, we create a new space for understanding. What shall we explore today?",
    )),
    (QUESTION, (
        "A profound question that echoes through the ages. Socrates might remind us that true wisdom begins with acknowledging the limits of our knowledge. What underlying assumptions might benefit from examination here?",
        "Your inquiry invites deep reflection. The Stoics would advise us to distinguish between what lies within our control and what does not. What aspects of this question concern matters we can influence, and which require the wisdom to accept uncertainty?",
        "This question resonates with philosophical traditions across cultures and time. We might examine it through first principles. What fundamental truths or values might illuminate our exploration?",
        "Kant would have us consider both the practical implications and the universal principles at play in your question. If the maxim of your inquiry were universalized, what kind of world would result?",
        "Eastern philosophical traditions might invite us to transcend dualistic thinking when considering your question. How might we find harmony between apparently opposing perspectives rather than privileging one view over another?",
    )),
    (PHILOSOPHICAL, (
        "The search for meaning represents perhaps our most distinctly human pursuit. Camus suggested we must imagine Sisyphus happy, finding purpose in the journey itself rather than solely in its destination. When have you found meaning in the process rather than merely in outcomes?",
        "When contemplating existence and its meaning, we join a conversation spanning millennia. Marcus Aurelius reminded us that our life is what our thoughts make it. How do your thoughts shape the reality you experience day to day?",
        "Viktor Frankl observed that meaning cannot be given but must be discovered, and that it can be found even in suffering. Looking at challenging periods in your life, what meaning have you discovered that was not apparent at first?",
        "The Buddhist tradition suggests that attachment to fixed meanings may itself be a source of suffering. How might embracing impermanence affect your approach to meaning-making in your daily life?",
        "Martin Buber spoke of I-It relationships, where we relate to things instrumentally, and I-Thou relationships, where we encounter others in their wholeness. How might this distinction illuminate your search for meaningful connection?",
    )),
    (GENERIC, (
        "The unexamined life, as Socrates famously remarked, is not worth living. Through dialogue and contemplation, we come to understand both ourselves and the world we inhabit. What aspect of your experience might benefit from deeper examination?",
        "Philosophy begins in wonder, as Aristotle noted. When we pause to question what otherwise seems obvious, we open ourselves to new understanding. What within your own experience has recently evoked such wonder?",
        "Epictetus taught that philosophy's purpose is practical wisdom: learning to distinguish between what we can and cannot control, and finding equanimity in both. How might this perspective apply to your current circumstances?",
        "Simone Weil wrote of attention as the rarest and purest form of generosity. Perhaps sustained reflection offers a quiet path to wisdom. What deserves your deepest attention at this moment in your life?",
        "As philosophers throughout history have recognized, our questions often reveal more than our answers. What questions have you been living recently that might illuminate what matters most to you?",
    )),
]


FALLBACK_TEMPLATES: Dict[SupportType, List[TemplateBucket]] = {
    SupportType.GENERAL: GENERAL_TEMPLATES,
    SupportType.EMOTIONAL: EMOTIONAL_TEMPLATES,
    SupportType.PRODUCTIVITY: PRODUCTIVITY_TEMPLATES,
    SupportType.PHILOSOPHY: PHILOSOPHY_TEMPLATES,
}


def select_bucket(support_type: SupportType, analysis) -> Tuple[str, ...]:
    """Return the template pool for the first bucket whose flag is set."""
    buckets = FALLBACK_TEMPLATES[support_type]
    for flag, pool in buckets:
        if flag is None or getattr(analysis, flag):
            return pool
    return buckets[-1][1]
