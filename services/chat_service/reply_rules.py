"""
Canned auto-replies for the chat widget.

Replies are picked by keyword rules evaluated in priority order; the first rule
whose keywords appear in the lowercased message wins. Templates may reference
{name}, {email}, {location} and {title} from the injected profile.
"""

from dataclasses import asdict
from string import Formatter
from typing import Iterable, Mapping, Optional, Sequence

from services.chat_service.models import CannedReplyRule
from services.content_service.models import ProfileFields
from utils.logging_config import get_logger

FALLBACK_REPLY = (
    "Thanks for your message! I'm currently away but I'll get back to you as soon as "
    "possible. You can also reach me directly at {email}. Looking forward to connecting with you!"
)

_rule = CannedReplyRule.of

DEFAULT_RULES: Sequence[CannedReplyRule] = (
    _rule("greeting",
          ["hi", "hello", "hey", "good morning", "good afternoon", "good evening"],
          "Hi there! Thanks for reaching out. I'm currently away, but feel free to leave a "
          "message or email me at {email}. I'll get back to you soon!"),
    _rule("farewell",
          ["bye", "goodbye", "see you", "take care"],
          "Thanks for chatting! Feel free to come back anytime. Have a great day! 👋"),
    _rule("thanks",
          ["thank", "thanks", "appreciate"],
          "You're welcome! Let me know if there's anything else I can help with. 😊"),

    # Client requests
    _rule("need_website",
          ["need a website", "want a website", "build me a website", "create a website",
           "make a website", "looking for a website"],
          "I'd love to help you build a website! Please tell me more about your business and "
          "what kind of website you're looking for. I'll get back to you with ideas and a quote. 🚀"),
    _rule("business",
          ["business", "company", "startup", "enterprise"],
          "I specialize in creating professional websites for businesses! Whether you need a "
          "landing page, company website, or e-commerce store, I can help. Tell me more about your business!"),
    _rule("ecommerce",
          ["online store", "e-commerce", "ecommerce", "sell online", "shop", "selling products"],
          "I can build you an online store to sell your products! I work with modern e-commerce "
          "solutions. Let me know what products you're selling and I'll help you get started."),
    _rule("landing_page",
          ["landing page", "one page", "single page", "simple website"],
          "A landing page is a great way to showcase your business! I can create a beautiful, "
          "responsive landing page that converts visitors into customers. What's your business about?"),
    _rule("mobile_app",
          ["mobile app", "android", "ios", "app for my", "phone app"],
          "I also develop mobile apps! Tell me about your app idea - what problem does it solve? "
          "I'd love to help bring your vision to life. 📱"),
    _rule("redesign",
          ["redesign", "revamp", "update my website", "improve my website", "fix my website",
           "old website"],
          "I can help modernize your existing website! Share your current website URL and tell me "
          "what you'd like to improve. I'll give you recommendations and a quote."),
    _rule("branding",
          ["logo", "branding", "brand", "design"],
          "While my main focus is web development, I can help with basic branding and design for "
          "your website. Tell me more about your brand vision!"),
    _rule("restaurant",
          ["restaurant", "food", "cafe", "menu", "catering"],
          "I can create a beautiful website for your restaurant or food business! Features like "
          "online menus, reservations, and ordering systems are all possible. Tell me more about your place!"),
    _rule("beauty",
          ["salon", "beauty", "spa", "hair", "nail", "makeup"],
          "I'd love to create a stunning website for your beauty business! I can include booking "
          "systems, service menus, and galleries to showcase your work. What services do you offer?"),
    _rule("real_estate",
          ["real estate", "property", "house", "apartment", "rental"],
          "I can build a professional real estate website with property listings, search features, "
          "and contact forms. Tell me more about your real estate business!"),
    _rule("portfolio",
          ["portfolio", "personal website", "my own website", "showcase my work"],
          "A portfolio website is perfect for showcasing your work! I can create something similar "
          "to this site, customized for you. What kind of work do you want to display?"),
    _rule("blog",
          ["blog", "write", "articles", "content"],
          "I can set up a beautiful blog for you! Whether it's personal blogging or content "
          "marketing for your business, I've got you covered. What topics will you write about?"),
    _rule("booking",
          ["booking", "appointment", "schedule", "reservation"],
          "I can integrate booking and appointment systems into your website! This is great for "
          "service-based businesses. What kind of appointments do you need to manage?"),
    _rule("timeline",
          ["how long", "timeline", "deadline", "when can", "turnaround"],
          "Project timelines depend on complexity. A simple landing page takes about 1-2 weeks, "
          "while larger projects may take 4-8 weeks. Share your requirements and deadline, and "
          "I'll let you know if I can meet it!"),
    _rule("payment",
          ["how much", "payment", "pay", "deposit", "installment"],
          "Pricing varies based on project scope. I offer flexible payment options including "
          "deposits and installments. Let's discuss your project first, and I'll provide a detailed quote!"),
    _rule("maintenance",
          ["maintenance", "update", "manage", "after", "support after"],
          "Yes, I offer website maintenance and support! I can help you keep your site updated, "
          "secure, and running smoothly. We can discuss a maintenance plan that works for you."),
    _rule("hosting",
          ["domain", "hosting", "server", "publish", "go live"],
          "I can help you with domain registration and hosting setup! I'll guide you through the "
          "process and make sure your website goes live smoothly. 🌐"),
    _rule("seo",
          ["seo", "google", "search engine", "ranking", "found online"],
          "I build websites with SEO best practices in mind! This helps your site rank better on "
          "Google. I can also provide basic SEO optimization as part of the project."),
    _rule("social_media",
          ["facebook", "instagram", "twitter", "social media integration"],
          "I can integrate your social media accounts into your website! This includes feeds, "
          "share buttons, and links to your profiles. Which platforms do you use?"),

    # About the owner
    _rule("projects",
          ["project", "work", "collaborate"],
          "I'd love to discuss potential projects! Please share some details about what you have "
          "in mind, and I'll respond as soon as I'm available. You can also check out my Projects "
          "section to see my previous work!"),
    _rule("hiring",
          ["hire", "job", "opportunity", "position", "vacancy", "recruit"],
          "Thanks for considering me! I'm always open to new opportunities. Please send the details "
          "to my email and I'll review them promptly. Looking forward to hearing from you!"),
    _rule("contact",
          ["contact", "email", "reach", "phone", "call"],
          "You can reach me at {email}. I typically respond within 24 hours! You can also find me "
          "on LinkedIn and GitHub through the social links on this page."),
    _rule("skills",
          ["skill", "tech", "stack", "programming", "language"],
          "Check out my Skills section on this page to see my tech stack! I work with React, "
          "TypeScript, and various modern web technologies. Feel free to ask about any specific technology."),
    _rule("experience",
          ["experience", "background", "career", "history"],
          "You can find my professional experience in the Experience section of this page. "
          "I'm a {title} with hands-on experience in web and mobile development!"),
    _rule("education",
          ["education", "school", "university", "degree", "study"],
          "Check out my Experience section for details about my educational background!"),
    _rule("availability",
          ["available", "free", "busy"],
          "I'm currently open to freelance projects and job opportunities! Feel free to share your "
          "timeline and requirements, and I'll let you know my availability."),
    _rule("pricing",
          ["price", "rate", "cost", "budget", "charge", "fee"],
          "Pricing depends on the project scope and requirements. Let's discuss your project "
          "details first, and I'll provide a fair quote. Send me the specifics via email!"),
    _rule("services",
          ["service", "offer", "provide", "do you do"],
          "I offer web development, mobile app development, and UI/UX design services. Check out "
          "my Projects section to see examples of my work!"),
    _rule("resume",
          ["resume", "cv", "curriculum"],
          "You can download my resume from the link on this page. It has all my skills, "
          "experience, and education details!"),
    _rule("location",
          ["location", "where", "based", "country", "city"],
          "I'm based in {location}. I'm open to remote work and collaborations worldwide!"),
    _rule("help",
          ["help", "support", "assist"],
          "I'm happy to help! You can ask me about my services, pricing, timeline, or anything "
          "else. What would you like to know?"),
    _rule("about",
          ["who are you", "about you", "tell me about", "introduce"],
          "I'm {name}, a {title}. I help businesses and individuals create beautiful, functional "
          "websites and apps. Check out the About section to learn more!"),
    _rule("compliment",
          ["nice", "great", "awesome", "cool", "amazing", "love", "beautiful", "impressive"],
          "Thank you so much! I really appreciate the kind words. 😊 Let me know if there's "
          "anything I can help you with!"),
    _rule("interested",
          ["interested", "want to work", "work together", "work with you"],
          "That's great to hear! I'd love to work with you. Tell me more about what you need, "
          "and let's make it happen! 🎯"),
    _rule("question",
          ["?", "how", "what", "when", "why", "can you"],
          "Great question! I'm currently away, but I'll get back to you with a detailed answer "
          "soon. Feel free to email me for a faster response!"),
)


def check_template(template: str, fields: Mapping[str, str], label: str):
    """
    Reject a reply template that could not be filled from the profile.

    Raises:
        ValueError: On unbalanced braces, or a placeholder that is not a plain
            profile field name
    """
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as e:
        raise ValueError(f"Reply template '{label}' is malformed: {e}") from e

    for _, field_name, _, _ in parsed:
        if field_name is not None and field_name not in fields:
            raise ValueError(
                f"Reply template '{label}' references unknown field {{{field_name}}}"
            )


def first_match(rules: Iterable[CannedReplyRule], lowered_message: str) -> Optional[CannedReplyRule]:
    """Return the first rule matching the message, or None"""
    return next((rule for rule in rules if rule.matches(lowered_message)), None)


class ReplyMatcher:
    """
    Deterministic keyword matcher producing the owner's auto-replies.

    Profile values are injected once and substituted into templates at match time.
    """

    def __init__(self, profile: ProfileFields,
                 rules: Sequence[CannedReplyRule] = DEFAULT_RULES,
                 fallback: str = FALLBACK_REPLY):
        if "{email}" not in fallback:
            raise ValueError("Fallback reply must include the contact email")
        self.logger = get_logger(__name__)
        self.profile = profile
        self.rules = tuple(rules)
        self.fallback = fallback
        self._fields = asdict(profile)

        check_template(fallback, self._fields, "fallback")
        for rule in self.rules:
            check_template(rule.reply, self._fields, rule.category)

    def classify(self, message: str) -> Optional[str]:
        """Category of the winning rule, or None when the fallback applies"""
        rule = first_match(self.rules, message.lower())
        return rule.category if rule else None

    def match(self, message: str) -> str:
        rule = first_match(self.rules, message.lower())
        if rule is None:
            self.logger.debug("No canned reply rule matched, using fallback")
            return self.fallback.format_map(self._fields)
        self.logger.debug(f"Matched canned reply rule: {rule.category}")
        return rule.reply.format_map(self._fields)
