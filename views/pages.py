# views/pages.py
import logging
import re

from flask import Blueprint, render_template, request, flash, redirect, url_for

logger = logging.getLogger(__name__)

pages_bp = Blueprint("pages", __name__, template_folder="../templates")

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MAX_MESSAGE_LENGTH = 2000

skills = [
    {
        "name": "Bharatanatyam",
        "summary": "The sculptural classical form of Tamil Nadu, taught from adavus to full margam.",
        "highlights": ["Adavu foundations", "Abhinaya and mudras", "Arangetram preparation"],
    },
    {
        "name": "Kathak",
        "summary": "Storytelling through footwork and spins from the courts of North India.",
        "highlights": ["Tatkar and chakkar", "Lucknow and Jaipur gharanas", "Tabla-led rhythm work"],
    },
    {
        "name": "Odissi",
        "summary": "Fluid tribhangi postures drawn from the temple sculptures of Odisha.",
        "highlights": ["Chowka and tribhangi", "Pallavi compositions", "Jayadeva's Gita Govinda"],
    },
    {
        "name": "Mudra Lab",
        "summary": "Practise hand gestures and body poses in front of our AI camera.",
        "highlights": ["Real-time gesture feedback", "Body pose recognition", "Works in your browser"],
        "link": "gesture.index",
    },
]

gallery_items = [
    {"title": "Margam Evening", "caption": "Senior students at the annual recital.", "image": "img/gallery/margam.svg"},
    {"title": "Ghungroo Pooja", "caption": "Blessing the bells before a first performance.", "image": "img/gallery/ghungroo.svg"},
    {"title": "Summer Intensive", "caption": "Two weeks of abhinaya and nritta.", "image": "img/gallery/intensive.svg"},
    {"title": "Temple Festival", "caption": "Odissi ensemble at the spring festival.", "image": "img/gallery/festival.svg"},
    {"title": "Little Feet", "caption": "Our youngest batch learning tatkar.", "image": "img/gallery/little_feet.svg"},
    {"title": "Mudra Lab", "caption": "Students trying the AI camera.", "image": "img/gallery/mudra_lab.svg"},
]

contact_details = {
    "email": "hello@nrityalaya.in",
    "phone": "+91 98450 12345",
    "address": "12 Kalakshetra Road, Chennai",
}


@pages_bp.route("/")
def home():
    return render_template("home.html", skills=skills)


@pages_bp.route("/about")
def about():
    return render_template("about.html")


@pages_bp.route("/gallery")
def gallery():
    return render_template("gallery.html", items=gallery_items)


def validate_enquiry(form):
    data = {key: form.get(key, "").strip() for key in ("name", "email", "message")}
    errors = {}
    if not data["name"]:
        errors["name"] = "Please tell us your name."
    if not data["email"]:
        errors["email"] = "Please provide an email address."
    elif not EMAIL_RE.match(data["email"]):
        errors["email"] = "Please provide a valid email address."
    if not data["message"]:
        errors["message"] = "Please write a message."
    elif len(data["message"]) > MAX_MESSAGE_LENGTH:
        errors["message"] = f"Messages are limited to {MAX_MESSAGE_LENGTH} characters."
    return data, errors


@pages_bp.route("/contact", methods=["GET", "POST"])
def contact():
    if request.method == "POST":
        data, errors = validate_enquiry(request.form)
        if errors:
            return render_template(
                "contact.html", details=contact_details, form=data, errors=errors
            ), 400

        # Enquiries are not stored anywhere
        logger.info("Contact enquiry from %s <%s>", data["name"], data["email"])
        flash(f"Thank you, {data['name']}! We will get back to you soon.")
        return redirect(url_for("pages.contact"), code=303)

    return render_template("contact.html", details=contact_details, form={}, errors={})
