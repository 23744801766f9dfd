# All UI strings for French locale
MESSAGES = {
    # App
    "app.title": "Formulaire d'inscription",
    "app.subtitle": "Génération automatique de formulaire avec champs conditionnels",
    "app.language": "Langue",
    # Form
    "form.submit": "Soumettre le Formulaire",
    "form.reset": "Réinitialiser",
    "form.submitted": "Formulaire envoyé",
    "form.select.placeholder": "Sélectionnez {fieldName}",
    # Field labels
    "field.name": "Nom",
    "field.email": "Email",
    "field.password": "Mot de passe",
    "field.repeatPassword": "Répéter le mot de passe",
    "field.country": "Pays",
    "field.gender": "Genre",
    "field.notifications": "Notifications",
    "field.newsletter": "Newsletter",
    "field.phoneNumber": "Numéro de téléphone",
    "field.address": "Adresse",
    "field.terms": "Conditions générales",
    # Field descriptions
    "field.notifications.description": "Recevoir les notifications par email",
    "field.newsletter.description": "S'abonner à notre newsletter",
    "field.terms.description": "J'accepte les conditions générales",
    # Field placeholders
    "field.name.placeholder": "Entrez votre nom complet",
    "field.email.placeholder": "Entrez votre adresse email",
    "field.password.placeholder": "Entrez votre mot de passe",
    "field.repeatPassword.placeholder": "Confirmez votre mot de passe",
    "field.phoneNumber.placeholder": "Entrez votre numéro de téléphone",
    "field.address.placeholder": "Entrez votre adresse",
    # Country options
    "country.us": "États-Unis",
    "country.ca": "Canada",
    "country.uk": "Royaume-Uni",
    "country.fr": "France",
    "country.de": "Allemagne",
    # Gender options
    "gender.male": "Homme",
    "gender.female": "Femme",
    "gender.other": "Autre",
    "gender.prefer-not-to-say": "Préfère ne pas dire",
    # Generic errors
    "error.required": "Ce champ est requis",
    "error.invalid": "Valeur invalide",
    "error.string.min": "Doit contenir au moins {min} caractères",
    "error.string.max": "Doit contenir au plus {max} caractères",
    "error.string.length": "Doit contenir exactement {length} caractères",
    "error.number.invalid": "Doit être un nombre",
    "error.number.integer": "Doit être un nombre entier",
    "error.number.min": "Doit être au moins {min}",
    "error.number.max": "Doit être au plus {max}",
    # Field errors
    "error.name.min": "Le nom doit contenir au moins 2 caractères",
    "error.email.invalid": "Veuillez entrer un email valide",
    "error.password.min": "Le mot de passe doit contenir au moins 6 caractères",
    "error.password.match": "Les mots de passe ne correspondent pas",
    "error.password.length": "Le mot de passe doit contenir au moins 6 caractères",
    "error.terms.required": "Vous devez accepter les conditions",
    "error.phoneNumber.required": "Le numéro de téléphone est requis et doit contenir exactement 10 chiffres pour les résidents américains",
    "error.phoneNumber.length": "Le numéro de téléphone doit contenir exactement 10 chiffres",
}
